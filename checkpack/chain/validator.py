"""Deferred validation chain engine."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
import inspect
import logging
from typing import Any, Awaitable, Callable

from checkpack.chain.exceptions import ValidationError, ValidatorUsageError
from checkpack.chain.messages import (
    equal_message,
    format_failure,
    in_message,
    missing_message,
    not_equal_message,
    not_in_message,
    required_message,
)
from checkpack.chain.models import ErrorOverride, Step, ValidatorOptions, ensure_error_override
from checkpack.core.kinds import is_missing_value
from checkpack.equality import is_equal as values_equal
from checkpack.render import inspect_value

logger = logging.getLogger(__name__)


class Validator:
    """A chainable validator bound to a single value.

    Chain methods either adjust the validator immediately or append a
    deferred step, and always return the same instance. Nothing is checked
    until ``get()`` runs the steps in the order they were added.
    """

    __slots__ = ("_value", "_name", "_error", "_allow_null", "_steps")

    def __init__(self, value: Any, options: ValidatorOptions | None = None) -> None:
        resolved = options or ValidatorOptions()
        self._value = value
        self._name = resolved.name
        self._error = resolved.error
        self._allow_null = False
        self._steps: list[Step] = []

    def __repr__(self) -> str:
        return f"Validator(name={self._name!r}, steps={len(self._steps)})"

    @property
    def value(self) -> Any:
        """The current value; transforms replace it only when ``get()`` runs."""
        return self._value

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def allow_null(self) -> bool:
        return self._allow_null

    @property
    def steps(self) -> tuple[Step, ...]:
        return tuple(self._steps)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self._name,
            "allow_null": self._allow_null,
            "has_error_override": self._error is not None,
            "steps": [step.to_dict() for step in self._steps],
        }

    async def get(self) -> Any:
        """Run every step in order and return the resulting value.

        Raises the failing step's override if it has one, else the
        validator-wide override, else the step's own error
        (``ValidationError`` for built-in assertions).
        """
        for index, step in enumerate(self._steps, start=1):
            logger.debug("validator step start name=%s index=%d", step.name, index)
            try:
                result = step.action()
                if inspect.isawaitable(result):
                    await result
            except Exception as error:
                override, source = self._select_override(step)
                logger.debug(
                    "validator step failed name=%s index=%d error_type=%s override=%s",
                    step.name,
                    index,
                    error.__class__.__name__,
                    source,
                )
                if override is None:
                    raise
                resolved = await self._resolve_override(override)
                raise resolved from error

        logger.debug("validator completed name=%s steps=%d", self._name, len(self._steps))
        return self._value

    def get_sync(self) -> Any:
        """Run ``get()`` to completion from synchronous code."""
        return asyncio.run(self.get())

    def custom(self, callback: Callable[[Any], Any]) -> Validator:
        """Replace the value with ``callback(value)``, awaiting it if needed.

        Anything the callback raises fails the chain.
        """
        if not callable(callback):
            raise ValidatorUsageError("custom() expects a callable")

        def transform() -> Awaitable[None] | None:
            result = callback(self._value)
            if inspect.isawaitable(result):
                return self._assign_awaited(result)
            self._value = result
            return None

        return self._append("custom", transform)

    def with_error(self, error: ErrorOverride) -> Validator:
        """Set the error raised when the previous step fails.

        ``error`` is a message for ``ValidationError``, an exception
        instance, or a callable receiving the current value and returning
        either. It takes precedence over built-in and validator-wide errors.
        """
        if not self._steps:
            raise ValidatorUsageError("with_error() requires a preceding validation step")
        ensure_error_override(error)
        self._steps[-1].error = error
        return self

    def set_fallback(self, value: Any, *, allow_null: bool = False) -> Validator:
        """Replace the current value with ``value`` right away if it is missing."""
        self._allow_null = allow_null
        if self._value_missing():
            self._value = value
        return self

    def is_required(self, *, allow_null: bool = False) -> Validator:
        self._allow_null = allow_null

        def check_required() -> None:
            if self._value_missing():
                self._fail(required_message(self._value))

        return self._append("is_required", check_required)

    def not_required(self) -> Validator:
        return self

    def is_missing(self, *, allow_null: bool = False) -> Validator:
        self._allow_null = allow_null

        def check_missing() -> None:
            if not self._value_missing():
                self._fail(missing_message(self._value))

        return self._append("is_missing", check_missing)

    def not_missing(self, *, allow_null: bool = False) -> Validator:
        self._allow_null = allow_null

        def check_not_missing() -> None:
            if self._value_missing():
                self._fail(required_message(self._value))

        return self._append("not_missing", check_not_missing)

    def is_equal(self, value: Any, *, deep: bool = False) -> Validator:
        def check_equal() -> None:
            if not values_equal(self._value, value, deep=deep):
                self._fail(equal_message(self._value, value))

        return self._append("is_equal", check_equal)

    def not_equal(self, value: Any, *, deep: bool = False) -> Validator:
        def check_not_equal() -> None:
            if values_equal(self._value, value, deep=deep):
                self._fail(not_equal_message(value))

        return self._append("not_equal", check_not_equal)

    def is_in(self, values: Iterable[Any], *, deep: bool = False) -> Validator:
        candidates = _as_candidates(values, "is_in")

        def check_in() -> None:
            if not any(values_equal(self._value, item, deep=deep) for item in candidates):
                self._fail(in_message(self._value, candidates))

        return self._append("is_in", check_in)

    def not_in(self, values: Iterable[Any], *, deep: bool = False) -> Validator:
        candidates = _as_candidates(values, "not_in")

        def check_not_in() -> None:
            for index, item in enumerate(candidates):
                if values_equal(self._value, item, deep=deep):
                    self._fail(not_in_message(candidates, index))

        return self._append("not_in", check_not_in)

    def _append(self, name: str, action: Callable[[], Any]) -> Validator:
        self._steps.append(Step(name=name, action=action))
        return self

    def _value_missing(self) -> bool:
        # Read at check time: the most recent nullable call sets the flag for every step.
        return is_missing_value(self._value, allow_null=self._allow_null)

    def _fail(self, message: str) -> None:
        raise ValidationError(format_failure(message, self._name))

    async def _assign_awaited(self, pending: Awaitable[Any]) -> None:
        self._value = await pending

    def _select_override(self, step: Step) -> tuple[ErrorOverride | None, str]:
        if step.error is not None:
            return step.error, "step"
        if self._error is not None:
            return self._error, "validator"
        return None, "none"

    async def _resolve_override(self, override: ErrorOverride) -> BaseException:
        resolved: Any = override
        if not isinstance(resolved, (str, BaseException)):
            resolved = resolved(self._value)
            if inspect.isawaitable(resolved):
                resolved = await resolved
        if isinstance(resolved, str):
            return ValidationError(resolved)
        if isinstance(resolved, BaseException):
            return resolved
        raise ValidatorUsageError(
            "error factory must return a message string or an exception, "
            f"got {inspect_value(resolved)}"
        )


def _as_candidates(values: Iterable[Any], method: str) -> tuple[Any, ...]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise ValidatorUsageError(f"{method}() expects a collection of candidate values")
    return tuple(values)
