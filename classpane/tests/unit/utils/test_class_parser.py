"""Tests for class-name parsing utilities."""

from __future__ import annotations

from classpane.utils.class_parser import (
    parse_class_attribute,
    serialize_classes,
    split_text_into_classes,
)


class TestParseClassAttribute:
    """Tests for parse_class_attribute (live attribute path)."""

    def test_splits_on_whitespace(self) -> None:
        assert parse_class_attribute("a b\tc\nd") == ["a", "b", "c", "d"]

    def test_drops_empty_tokens(self) -> None:
        assert parse_class_attribute("  a   b  ") == ["a", "b"]

    def test_keeps_dots_and_commas(self) -> None:
        """Attribute values are whitespace-only separated."""
        assert parse_class_attribute(" a  b.c ,d") == ["a", "b.c", ",d"]

    def test_none_and_empty(self) -> None:
        assert parse_class_attribute(None) == []
        assert parse_class_attribute("") == []
        assert parse_class_attribute("   ") == []


class TestSplitTextIntoClasses:
    """Tests for split_text_into_classes (typed input path)."""

    def test_splits_on_dot_comma_and_whitespace(self) -> None:
        assert set(split_text_into_classes(" a  b.c ,d")) >= {"a", "b", "c", "d"}

    def test_selector_style_input(self) -> None:
        assert split_text_into_classes(".foo.bar") == ["foo", "bar"]

    def test_blank_input(self) -> None:
        assert split_text_into_classes("") == []
        assert split_text_into_classes(" .,  ") == []


class TestSerializeClasses:
    """Tests for serialize_classes."""

    def test_sorted_and_deduplicated(self) -> None:
        assert serialize_classes(["b", "a", "b", "c"]) == "a b c"

    def test_empty(self) -> None:
        assert serialize_classes([]) == ""

    def test_parse_then_serialize_normalizes(self) -> None:
        assert serialize_classes(parse_class_attribute("  z a  a m ")) == "a m z"
