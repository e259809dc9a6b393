"""Class name input with asynchronous autocompletion."""

from __future__ import annotations

import logging
from typing import ClassVar

from textual.actions import SkipAction
from textual.binding import Binding, BindingType
from textual.message import Message
from textual.suggester import Suggester
from textual.widgets import Input

from classpane.constants.defaults import PLACEHOLDER_DEFAULT
from classpane.controllers.completion.provider import ClassNameCompletionProvider

logger = logging.getLogger(__name__)

# Words are completed independently; only the text after the last space is the prefix.
COMPLETION_STOP_CHARACTER = " "


class ClassNameSuggester(Suggester):
    """Adapts ClassNameCompletionProvider to Textual's inline suggestions."""

    def __init__(self, provider: ClassNameCompletionProvider) -> None:
        # Results depend on the selection, so nothing may be cached by value.
        super().__init__(use_cache=False, case_sensitive=True)
        self._provider = provider

    async def get_suggestion(self, value: str) -> str | None:
        prefix = value.rsplit(COMPLETION_STOP_CHARACTER, 1)[-1]
        suggestions = await self._provider.complete(value, prefix)
        if not suggestions:
            return None
        return value[: len(value) - len(prefix)] + suggestions[0].text


class ClassNameInput(Input):
    """Single-line input for new class names.

    Enter first accepts a visible suggestion, then commits. Escape discards
    the text; on blank input the key is left for parent bindings.
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    class Committed(Message):
        """Posted when the user commits the typed text."""

        def __init__(self, class_input: ClassNameInput, text: str) -> None:
            super().__init__()
            self.class_input = class_input
            self.text = text

        @property
        def control(self) -> ClassNameInput:
            return self.class_input

    class Cancelled(Message):
        """Posted when the user discards the typed text."""

        def __init__(self, class_input: ClassNameInput) -> None:
            super().__init__()
            self.class_input = class_input

        @property
        def control(self) -> ClassNameInput:
            return self.class_input

    def __init__(
        self,
        provider: ClassNameCompletionProvider | None = None,
        *,
        placeholder: str = PLACEHOLDER_DEFAULT,
        id: str | None = None,
        classes: str | None = None,
        disabled: bool = False,
    ) -> None:
        suggester = ClassNameSuggester(provider) if provider is not None else None
        super().__init__(
            placeholder=placeholder,
            suggester=suggester,
            id=id,
            classes=classes,
            disabled=disabled,
            select_on_focus=False,
        )

    @property
    def current_suggestion(self) -> str:
        """The inline suggestion for the current value, or an empty string."""
        suggestion = self._suggestion
        if suggestion and suggestion.startswith(self.value):
            return suggestion
        return ""

    def text_with_current_suggestion(self) -> str:
        return self.current_suggestion or self.value

    def accept_autocomplete(self) -> bool:
        """Replace the value with the visible suggestion.

        Returns:
            True if a suggestion was accepted.
        """
        suggestion = self.current_suggestion
        if not suggestion or suggestion == self.value or not self.cursor_at_end:
            return False
        self.value = suggestion
        self.cursor_position = len(self.value)
        return True

    def clear_text(self) -> None:
        """Clear the value without posting ``Input.Changed``."""
        with self.prevent(Input.Changed):
            self.value = ""

    async def action_submit(self) -> None:
        if self.accept_autocomplete():
            return
        self.post_message(self.Committed(self, self.value))

    def action_cancel(self) -> None:
        blank = not self.value.strip()
        self.post_message(self.Cancelled(self))
        if blank:
            raise SkipAction()
