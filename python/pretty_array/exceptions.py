"""Exception hierarchy for array rendering."""

from typing import Any, Dict, Optional, Tuple


class PrettyArrayError(Exception):
    """Base exception for all pretty_array errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotAnArrayError(PrettyArrayError, TypeError):
    """Input is a scalar or otherwise not array-like."""

    def __init__(self, obj: Any):
        super().__init__(
            f"Expected an array-like object of rank >= 1, not {type(obj).__name__}",
            details={"type": type(obj).__name__},
        )


class RaggedArrayError(PrettyArrayError, ValueError):
    """Nested input is not rectangular."""

    def __init__(self, probed: Tuple[int, ...], actual: Optional[Tuple[int, ...]] = None):
        if actual is None:
            message = f"Array is ragged; expected rectangular shape {probed}"
        else:
            message = f"Array is ragged; probed shape {probed} but elements give {actual}"
        super().__init__(message, details={"probed": probed, "actual": actual})
