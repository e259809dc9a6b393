"""Shared fixtures for classpane tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from classpane.app import ClassPaneApp
from classpane.models.dom.loader import LoadedDocument, load_document
from classpane.models.state.app_settings import PaneSettings

FIXTURES_DIR = Path(__file__).parent / "fixtures"
DEMO_DOCUMENT = FIXTURES_DIR / "demo_document.yaml"


@pytest.fixture
def demo_document_path() -> Path:
    return DEMO_DOCUMENT


@pytest.fixture
def loaded() -> LoadedDocument:
    """The demo document, freshly built for each test."""
    return load_document(DEMO_DOCUMENT)


@pytest.fixture
def settings() -> PaneSettings:
    return PaneSettings()


@pytest.fixture
def app(loaded: LoadedDocument, settings: PaneSettings) -> ClassPaneApp:
    """App over the demo document with default settings (no config file read)."""
    return ClassPaneApp(loaded, settings=settings)
