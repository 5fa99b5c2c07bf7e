from __future__ import annotations

E_INVALID_ARGUMENT = "E_INVALID_ARGUMENT"
E_EMPTY_RESULT = "E_EMPTY_RESULT"
E_NULL_COMPARISON = "E_NULL_COMPARISON"
E_DIMENSION_MISMATCH = "E_DIMENSION_MISMATCH"
E_UNKNOWN_ENTRY = "E_UNKNOWN_ENTRY"
E_DEFINITION_INVALID = "E_DEFINITION_INVALID"


class DimensionError(Exception):
    def __init__(self, code: str, message: str, path: str | None = None) -> None:
        self.code = code
        self.message = message
        self.path = path
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.path:
            return f"{self.code}: {self.message} ({self.path})"
        return f"{self.code}: {self.message}"


class InvalidArgumentError(DimensionError, ValueError):
    """A required argument is missing or malformed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(E_INVALID_ARGUMENT, message, path=path)


class EmptyResultError(DimensionError, ValueError):
    """A derived dimension normalized to zero components."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(E_EMPTY_RESULT, message, path=path)


class NullComparisonError(DimensionError, TypeError):
    def __init__(self, message: str = "Cannot compare against None", path: str | None = None) -> None:
        super().__init__(E_NULL_COMPARISON, message, path=path)


class IncompatibleDimensionsError(DimensionError, ValueError):
    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(E_DIMENSION_MISMATCH, message, path=path)


class UnknownEntryError(DimensionError, LookupError):
    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(E_UNKNOWN_ENTRY, message, path=path)


class DefinitionError(DimensionError, ValueError):
    """A measurement system definition document is malformed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(E_DEFINITION_INVALID, message, path=path)


__all__ = [
    "E_DEFINITION_INVALID",
    "E_DIMENSION_MISMATCH",
    "E_EMPTY_RESULT",
    "E_INVALID_ARGUMENT",
    "E_NULL_COMPARISON",
    "E_UNKNOWN_ENTRY",
    "DefinitionError",
    "DimensionError",
    "EmptyResultError",
    "IncompatibleDimensionsError",
    "InvalidArgumentError",
    "NullComparisonError",
    "UnknownEntryError",
]
