"""Error values for yearfrac.

Errors are frozen dataclass values returned inside Err, never raised.
Base class YearfracError, one @final subclass for rejected selector input.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Self, final

from yearfrac.core.config import CONVENTION_CODES, CONVENTION_NAMES

INVALID_VALUE: str = "INVALID_VALUE"


@dataclass(frozen=True, slots=True)
class YearfracError:
    """Base error value. Not @final, has subclasses."""

    message: str
    code: str
    source: str  # "module.function" that produced this error

    def __str__(self) -> str:
        return self.message

    def with_context(self, context: str) -> Self:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidValueError(YearfracError):
    """A convention selector was given an unrecognised integer code or name."""

    value: str  # raw input as received, stringified

    @staticmethod
    def create(value: object, source: str) -> InvalidValueError:
        """Build the error with the standard message for a rejected input."""
        raw = str(value)
        names = ", ".join(CONVENTION_NAMES)
        return InvalidValueError(
            message=(
                f"Yearfrac: Invalid Value: {raw}. Has to be one of: {names} (from_str) "
                f"or in the range {CONVENTION_CODES[0]}-{CONVENTION_CODES[-1]} (from_int)."
            ),
            code=INVALID_VALUE,
            source=source,
            value=raw,
        )

    def to_dict(self) -> dict[str, object]:
        return {**YearfracError.to_dict(self), "value": self.value}
