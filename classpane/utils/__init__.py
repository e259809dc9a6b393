"""Utility functions for the classpane TUI."""

from classpane.utils.class_parser import (
    parse_class_attribute,
    serialize_classes,
    split_text_into_classes,
)

__all__ = [
    "parse_class_attribute",
    "serialize_classes",
    "split_text_into_classes",
]
