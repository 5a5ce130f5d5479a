"""Result: success value or a single tagged validation failure.

Pipeline stages return a Result and are chained with :meth:`Result.bind`,
which only runs the next stage while the chain is still successful.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, model_validator

from personcheck.domain.validations import PersonValidation

T = TypeVar("T")
U = TypeVar("U")


class Result(BaseModel, Generic[T]):
    """Either ``value`` (success) or ``error`` (failure), never both.

    Attributes:
        value: The stage output on success.
        error: The first violated rule on failure.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    value: T | None = None
    error: PersonValidation | None = None

    @model_validator(mode="after")
    def _exclusive(self) -> Result[T]:
        if self.error is not None and self.value is not None:
            raise ValueError("Result cannot carry both a value and an error")
        return self

    @classmethod
    def success(cls, value: Any) -> Result[Any]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: PersonValidation) -> Result[Any]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def bind(self, stage: Callable[[T], Result[U]]) -> Result[U]:
        """Feed the value into *stage*; propagate an existing error unchanged."""
        if self.error is not None:
            return Result.failure(self.error)
        return stage(self.value)  # type: ignore[arg-type]
