"""Regex patterns for class attribute and input parsing."""

import re

# Class attribute values are whitespace separated.
CLASS_ATTRIBUTE_SPLIT_PATTERN = re.compile(r"\s")

# Typed input also accepts selector-ish separators: ".foo.bar", "foo, bar".
CLASS_INPUT_SPLIT_PATTERN = re.compile(r"[.,\s]")

__all__ = [
    "CLASS_ATTRIBUTE_SPLIT_PATTERN",
    "CLASS_INPUT_SPLIT_PATTERN",
]
