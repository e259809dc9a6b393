"""Tests for loading document fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from classpane.constants.enums import NodeType
from classpane.models.dom.css_model import CSSModel
from classpane.models.dom.dom_model import DOMModel
from classpane.models.dom.loader import (
    DocumentLoadError,
    LoadedDocument,
    load_document,
    parse_document,
)

FIXTURE = Path(__file__).parent.parent.parent / "fixtures" / "demo_document.yaml"


class TestParseDocument:
    """Tests for parse_document."""

    def test_builds_tree_and_style_sheets(self) -> None:
        loaded = parse_document({
            "frame_id": "top",
            "style_sheets": [{"id": "s", "text": ".a {}"}],
            "children": [
                {
                    "name": "body",
                    "attributes": {"class": "x"},
                    "children": [{"text": "hello"}, {"comment": "note"}],
                },
            ],
        })

        document = loaded.document
        body = document.children[0]
        assert document.node_type == NodeType.DOCUMENT
        assert body.node_name == "body"
        assert body.get_attribute("class") == "x"
        assert [child.node_type for child in body.children] == [
            NodeType.TEXT,
            NodeType.COMMENT,
        ]
        assert loaded.css_model.all_style_sheets()[0].frame_id == "top"

    def test_frames_become_sub_documents(self) -> None:
        loaded = parse_document({
            "children": [
                {
                    "name": "iframe",
                    "frame": {"frame_id": "inner", "children": [{"name": "div"}]},
                },
            ],
        })

        iframe = loaded.document.children[0]
        sub_document = iframe.children[0]
        assert sub_document.node_type == NodeType.DOCUMENT
        assert sub_document.children[0].frame_id() == "inner"

    def test_rejects_non_mapping(self) -> None:
        with pytest.raises(DocumentLoadError):
            parse_document(["not", "a", "mapping"])

    def test_rejects_ambiguous_node(self) -> None:
        with pytest.raises(DocumentLoadError):
            parse_document({"children": [{"name": "div", "text": "both"}]})

    def test_rejects_text_with_children(self) -> None:
        with pytest.raises(DocumentLoadError):
            parse_document({"children": [{"text": "t", "children": [{"name": "b"}]}]})

    def test_write_latency_is_forwarded(self) -> None:
        loaded = parse_document({}, write_latency=0.25)
        assert loaded.dom_model._write_latency == 0.25

    def test_document_without_root_raises(self) -> None:
        loaded = LoadedDocument(dom_model=DOMModel(), css_model=CSSModel())
        with pytest.raises(DocumentLoadError):
            loaded.document


class TestLoadDocument:
    """Tests for load_document."""

    def test_loads_bundled_fixture(self) -> None:
        loaded = load_document(FIXTURE)
        sheet_ids = {sheet.style_sheet_id for sheet in loaded.css_model.all_style_sheets()}
        assert sheet_ids == {"site", "widget-frame-sheet"}
        assert loaded.document.frame_id() == "main"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentLoadError):
            load_document(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("children: [unclosed", encoding="utf-8")
        with pytest.raises(DocumentLoadError):
            load_document(path)
