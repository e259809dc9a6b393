"""Base controller with async-friendly patterns for the classpane TUI.

This module provides the foundation for controllers that talk to the
document collaborators without blocking the Textual event loop.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class WorkerResult:
    """Result wrapper for one asynchronous collaborator call."""

    success: bool
    data: Any | None = None
    error: str | None = None
    duration_ms: float = 0.0


class AsyncControllerMixin:
    """Mixin providing timing helpers for asynchronous operations."""

    def __init__(self) -> None:
        """Initialize the async controller mixin."""
        self._load_start_time: float | None = None

    def _start_timer(self) -> float:
        self._load_start_time = time.monotonic()
        return self._load_start_time

    @staticmethod
    def _elapsed_ms(start: float) -> float:
        return (time.monotonic() - start) * 1000


class BaseController(AsyncControllerMixin, ABC):
    """Base controller class.

    Subclasses own some cached view of the external document and must be
    able to drop it when the document is replaced.
    """

    @abstractmethod
    def reset(self) -> None:
        """Drop all cached state derived from the document."""
        ...
