"""Tests for base controller helpers."""

from __future__ import annotations

import pytest

from classpane.controllers.base.base_controller import (
    AsyncControllerMixin,
    BaseController,
    WorkerResult,
)


class TestWorkerResult:
    """Tests for WorkerResult dataclass."""

    def test_success_defaults(self) -> None:
        result = WorkerResult(success=True, data="a b")
        assert result.error is None
        assert result.duration_ms == 0.0

    def test_failure(self) -> None:
        result = WorkerResult(success=False, error="boom", duration_ms=1.5)
        assert not result.success
        assert result.error == "boom"


class TestAsyncControllerMixin:
    """Tests for timing helpers."""

    def test_timer(self) -> None:
        mixin = AsyncControllerMixin()
        assert mixin._load_start_time is None

        start = mixin._start_timer()

        assert mixin._load_start_time == start
        assert mixin._elapsed_ms(start) >= 0


class TestBaseController:
    """Tests for the abstract controller contract."""

    def test_cannot_instantiate_without_reset(self) -> None:
        class Incomplete(BaseController):
            pass

        with pytest.raises(TypeError):
            Incomplete()

    def test_subclass_with_reset(self) -> None:
        class Complete(BaseController):
            def reset(self) -> None:
                self.was_reset = True

        controller = Complete()
        controller.reset()
        assert controller.was_reset
