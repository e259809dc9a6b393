"""Controllers module for the classpane TUI.

This module provides the class-state synchronization engine and the
class-name completion provider.
"""

from __future__ import annotations

# Base classes
from classpane.controllers.base import (
    AsyncControllerMixin,
    BaseController,
    WorkerResult,
)

# Classes domain
from classpane.controllers.classes import (
    ClassesController,
    ClassesViewState,
    ClassTextInput,
    EchoSuppressor,
    Throttler,
)

# Completion domain
from classpane.controllers.completion import (
    ClassNameCompletionProvider,
    ClassNameFetcher,
    Suggestion,
)

__all__ = [
    # Base
    "AsyncControllerMixin",
    "BaseController",
    # Completion
    "ClassNameCompletionProvider",
    "ClassNameFetcher",
    # Classes
    "ClassTextInput",
    "ClassesController",
    "ClassesViewState",
    "EchoSuppressor",
    "Suggestion",
    "Throttler",
    "WorkerResult",
]
