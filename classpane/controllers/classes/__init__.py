"""Classes domain: class-state synchronization engine."""

from classpane.controllers.classes.controller import (
    ClassesController,
    ClassesViewState,
    ClassTextInput,
)
from classpane.controllers.classes.echo_suppressor import EchoSuppressor
from classpane.controllers.classes.throttler import Throttler

__all__ = [
    "ClassTextInput",
    "ClassesController",
    "ClassesViewState",
    "EchoSuppressor",
    "Throttler",
]
