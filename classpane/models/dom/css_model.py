"""Style sheet metadata: headers scoped by frame and the class names they use."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

import tinycss2
from tinycss2.ast import FunctionBlock, IdentToken, LiteralToken, SquareBracketsBlock

from classpane.constants.values import CSS_GROUPING_AT_RULES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleSheetHeader:
    """Identity and scope of one style sheet."""

    style_sheet_id: str
    frame_id: str
    source_url: str = ""


def extract_class_names(css_text: str) -> set[str]:
    """Return the class names referenced by selectors in ``css_text``.

    Only qualified rule preludes are scanned, so declaration values such as
    ``0.5em`` or ``url(a.png)`` never count. Rules nested in grouping at-rules
    (``@media``, ``@supports``, ...) are scanned like top-level rules. Class
    names come back unescaped: ``.sm\\:flex`` yields ``sm:flex``.
    """
    names: set[str] = set()
    _collect_rule_classes(
        tinycss2.parse_stylesheet(css_text, skip_comments=True, skip_whitespace=True),
        names,
    )
    return names


def _collect_rule_classes(rules: list, names: set[str]) -> None:
    for rule in rules:
        if rule.type == "qualified-rule":
            _collect_selector_classes(rule.prelude, names)
        elif (
            rule.type == "at-rule"
            and rule.lower_at_keyword in CSS_GROUPING_AT_RULES
            and rule.content is not None
        ):
            _collect_rule_classes(
                tinycss2.parse_rule_list(rule.content, skip_comments=True, skip_whitespace=True),
                names,
            )
        elif rule.type == "error":
            logger.debug(f"Skipping unparsable CSS at line {rule.source_line}: {rule.message}")


def _collect_selector_classes(tokens: list, names: set[str]) -> None:
    previous = None
    for token in tokens:
        if isinstance(token, IdentToken) and isinstance(previous, LiteralToken) and previous.value == ".":
            names.add(token.value)
        elif isinstance(token, FunctionBlock):
            # :not(.a), :is(.b, .c)
            _collect_selector_classes(token.arguments, names)
        # Attribute selector contents are values, never classes.
        previous = None if isinstance(token, SquareBracketsBlock) else token


class CSSModel:
    """Holds style sheets for a document and answers class-name queries."""

    def __init__(self) -> None:
        self._headers: dict[str, StyleSheetHeader] = {}
        self._texts: dict[str, str] = {}

    def add_style_sheet(self, header: StyleSheetHeader, text: str = "") -> None:
        self._headers[header.style_sheet_id] = header
        self._texts[header.style_sheet_id] = text
        logger.debug(
            f"Style sheet added: {header.style_sheet_id} (frame {header.frame_id!r})"
        )

    def all_style_sheets(self) -> list[StyleSheetHeader]:
        return list(self._headers.values())

    async def class_names(self, style_sheet_id: str) -> list[str]:
        """Return the class names used by one style sheet.

        Raises:
            KeyError: If the style sheet is unknown.
        """
        if style_sheet_id not in self._headers:
            raise KeyError(f"Unknown style sheet: {style_sheet_id}")
        await asyncio.sleep(0)
        return sorted(extract_class_names(self._texts[style_sheet_id]))
