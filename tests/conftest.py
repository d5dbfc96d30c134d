"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json
from pathlib import Path

import pytest
from devcn_ui.models.component import ComponentDescriptor


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user configuration and overrides out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.delenv("DEVCN_UI_REGISTRY_URL", raising=False)


@pytest.fixture
def button_source() -> str:
    """Component source importing a shadcn/ui primitive and clsx."""
    return """"use client";

import { Button } from '@repo/shadcn-ui/components/ui/button';
import { clsx } from 'clsx';
import type { ReactNode } from 'react';

export const Toolbar = ({ children }: { children: ReactNode }) => (
  <Button className={clsx("toolbar")}>{children}</Button>
);
"""


@pytest.fixture
def descriptor_payload(button_source: str) -> dict[str, object]:
    """Registry JSON body of a single component."""
    return {
        "name": "ai-toolbar",
        "type": "registry:ui",
        "files": [
            {
                "path": "registry/ai/toolbar.tsx",
                "type": "registry:ui",
                "content": button_source,
            }
        ],
    }


@pytest.fixture
def descriptor(descriptor_payload: dict[str, object]) -> ComponentDescriptor:
    """ComponentDescriptor built from the sample payload."""
    return ComponentDescriptor.from_dict("ai-toolbar", descriptor_payload)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Consumer project with a package.json declaring clsx as a devDependency."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "package.json").write_text(
        json.dumps(
            {
                "name": "consumer-app",
                "dependencies": {"next": "15.0.0", "react": "19.0.0"},
                "devDependencies": {"clsx": "^2.1.0"},
            }
        )
    )
    return project
