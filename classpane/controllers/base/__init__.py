"""Base controller classes."""

from classpane.controllers.base.base_controller import (
    AsyncControllerMixin,
    BaseController,
    WorkerResult,
)

__all__ = [
    "AsyncControllerMixin",
    "BaseController",
    "WorkerResult",
]
