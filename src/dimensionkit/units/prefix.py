from __future__ import annotations

import math
from dataclasses import dataclass

from dimensionkit.dimensions.errors import InvalidArgumentError, NullComparisonError


@dataclass(frozen=True)
class Prefix:
    """A named multiplier such as ``kilo`` (``k``, 1e3) or ``kibi`` (``Ki``, 1024).

    Prefixes sort by factor, then long form, then abbreviation with a missing
    abbreviation first.
    """

    long_form: str
    factor: float
    abbreviation: str | None = None

    def __post_init__(self) -> None:
        if not self.long_form:
            raise InvalidArgumentError("long form of prefix may not be empty")
        try:
            factor = float(self.factor)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError("prefix factor must be a number", path=self.long_form) from exc
        object.__setattr__(self, "factor", factor)
        if not math.isfinite(self.factor) or self.factor == 0.0:
            raise InvalidArgumentError("prefix factor must be finite and non-zero", path=self.long_form)

    def compare_to(self, other: Prefix) -> int:
        if other is None:
            raise NullComparisonError("Cannot compare a prefix against None")
        if self.factor != other.factor:
            return 1 if self.factor > other.factor else -1
        if self.long_form != other.long_form:
            return 1 if self.long_form > other.long_form else -1
        if self.abbreviation is None:
            return 0 if other.abbreviation is None else -1
        if other.abbreviation is None:
            return 1
        return (self.abbreviation > other.abbreviation) - (self.abbreviation < other.abbreviation)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Prefix):
            return NotImplemented
        return self.compare_to(other) < 0

    def __str__(self) -> str:
        return self.abbreviation or self.long_form


__all__ = ["Prefix"]
