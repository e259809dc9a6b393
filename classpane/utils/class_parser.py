"""Class-name parsing utilities.

Provides the two tokenizers used by the classes pane and the serializer for
written class attribute values:
- Attribute values: split on whitespace only ("a  b" -> ["a", "b"])
- Typed input: split on whitespace, "." and "," (".a.b, c" -> ["a", "b", "c"])
"""

from collections.abc import Iterable

from classpane.constants.patterns import (
    CLASS_ATTRIBUTE_SPLIT_PATTERN,
    CLASS_INPUT_SPLIT_PATTERN,
)


def parse_class_attribute(value: str | None) -> list[str]:
    """Split a live ``class`` attribute value into class names.

    Args:
        value: Attribute value, or None when the attribute is absent.

    Returns:
        Non-empty, trimmed tokens in attribute order (duplicates kept).
    """
    tokens = (token.strip() for token in CLASS_ATTRIBUTE_SPLIT_PATTERN.split(value or ""))
    return [token for token in tokens if token]


def split_text_into_classes(text: str) -> list[str]:
    """Split text typed into the class input into class names.

    Args:
        text: Raw input text, e.g. ``"foo bar"`` or ``".foo.bar"``.

    Returns:
        Non-empty, trimmed tokens in input order.
    """
    tokens = (token.strip() for token in CLASS_INPUT_SPLIT_PATTERN.split(text or ""))
    return [token for token in tokens if token]


def serialize_classes(class_names: Iterable[str]) -> str:
    """Join class names into an attribute value: de-duplicated, sorted, space separated."""
    return " ".join(sorted(set(class_names)))


__all__ = [
    "parse_class_attribute",
    "serialize_classes",
    "split_text_into_classes",
]
