"""Core component installation logic for devcn-ui."""
