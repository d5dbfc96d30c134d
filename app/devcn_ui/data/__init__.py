"""Bundled data files for devcn-ui."""
