"""Completion domain: class-name suggestions for the classes input."""

from classpane.controllers.completion.fetchers import ClassNameFetcher
from classpane.controllers.completion.provider import (
    ClassNameCompletionProvider,
    Suggestion,
)

__all__ = [
    "ClassNameCompletionProvider",
    "ClassNameFetcher",
    "Suggestion",
]
