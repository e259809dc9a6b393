"""Load a document fixture (node tree plus style sheets) from YAML.

Example file::

    frame_id: main
    style_sheets:
      - id: site
        text: |
          .card { padding: 1em; }
          .card.active { color: red; }
    children:
      - name: body
        attributes: {class: "page dark"}
        children:
          - name: div
            attributes: {class: "card"}
            children:
              - text: "Hello"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from classpane.models.dom.css_model import CSSModel, StyleSheetHeader
from classpane.models.dom.dom_model import DOMModel
from classpane.models.dom.node import DOMNode

logger = logging.getLogger(__name__)


class DocumentLoadError(Exception):
    """Raised when a document fixture cannot be read or is malformed."""


class StyleSheetDefinition(BaseModel):
    """One style sheet; an empty frame_id means the top-level frame."""

    id: str
    frame_id: str = ""
    source_url: str = ""
    text: str = ""


class FrameDefinition(BaseModel):
    """Sub-document content hosted by an element (e.g. an iframe)."""

    frame_id: str
    children: list[NodeDefinition] = Field(default_factory=list)


class NodeDefinition(BaseModel):
    """An element, text or comment node."""

    name: str = ""
    attributes: dict[str, str] = Field(default_factory=dict)
    text: str | None = None
    comment: str | None = None
    children: list[NodeDefinition] = Field(default_factory=list)
    frame: FrameDefinition | None = None

    @model_validator(mode="after")
    def _validate_kind(self) -> NodeDefinition:
        kinds = [bool(self.name), self.text is not None, self.comment is not None]
        if sum(kinds) != 1:
            raise ValueError("node must define exactly one of name, text or comment")
        if not self.name and (self.children or self.attributes or self.frame):
            raise ValueError("only element nodes may have attributes, children or frames")
        return self


class DocumentDefinition(BaseModel):
    """Top-level document fixture."""

    frame_id: str = "main"
    style_sheets: list[StyleSheetDefinition] = Field(default_factory=list)
    children: list[NodeDefinition] = Field(default_factory=list)


FrameDefinition.model_rebuild()
NodeDefinition.model_rebuild()


@dataclass
class LoadedDocument:
    """Collaborators built from a fixture."""

    dom_model: DOMModel
    css_model: CSSModel

    @property
    def document(self) -> DOMNode:
        document = self.dom_model.document
        if document is None:
            raise DocumentLoadError("Document model has no root document")
        return document


def build_document(
    definition: DocumentDefinition,
    *,
    write_latency: float = 0.0,
) -> LoadedDocument:
    """Materialize a validated definition into DOM and CSS models."""
    dom_model = DOMModel(write_latency=write_latency)
    css_model = CSSModel()

    document = dom_model.create_document(definition.frame_id)
    for child in definition.children:
        _build_node(dom_model, document, child)

    for sheet in definition.style_sheets:
        css_model.add_style_sheet(
            StyleSheetHeader(
                style_sheet_id=sheet.id,
                frame_id=sheet.frame_id or definition.frame_id,
                source_url=sheet.source_url,
            ),
            sheet.text,
        )
    return LoadedDocument(dom_model=dom_model, css_model=css_model)


def _build_node(dom_model: DOMModel, parent: DOMNode, definition: NodeDefinition) -> None:
    if definition.text is not None:
        dom_model.create_text(parent, definition.text)
        return
    if definition.comment is not None:
        dom_model.create_comment(parent, definition.comment)
        return

    element = dom_model.create_element(parent, definition.name, definition.attributes)
    for child in definition.children:
        _build_node(dom_model, element, child)
    if definition.frame is not None:
        sub_document = dom_model.create_document(definition.frame.frame_id)
        dom_model.attach_document(element, sub_document)
        for child in definition.frame.children:
            _build_node(dom_model, sub_document, child)


def parse_document(data: Any, *, write_latency: float = 0.0) -> LoadedDocument:
    """Validate raw fixture data (as loaded from YAML) and build it.

    Raises:
        DocumentLoadError: If the data does not describe a document.
    """
    if not isinstance(data, dict):
        raise DocumentLoadError("Document fixture must be a mapping")
    try:
        definition = DocumentDefinition.model_validate(data)
    except ValidationError as e:
        raise DocumentLoadError(f"Invalid document fixture: {e}") from e
    return build_document(definition, write_latency=write_latency)


def load_document(path: Path | str, *, write_latency: float = 0.0) -> LoadedDocument:
    """Read a YAML document fixture from disk.

    Raises:
        DocumentLoadError: If the file cannot be read, parsed or validated.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError) as e:
        raise DocumentLoadError(f"Failed to read document {path}: {e}") from e

    loaded = parse_document(data, write_latency=write_latency)
    logger.info(f"Loaded document fixture from {path}")
    return loaded
