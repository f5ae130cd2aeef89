from __future__ import annotations

from typing import Iterable, List, Optional


class YelpSearchError(RuntimeError):
    """Base error for the yelp_search package."""


class ValidationError(YelpSearchError, ValueError):
    """Raised when search criteria fail validation. No request is sent."""


class MissingCredentialError(ValidationError):
    """Raised when no non-empty access token is available."""


class RangeError(ValidationError):
    """Raised when a numeric value falls outside its allowed closed range."""

    def __init__(self, name: str, value, lower=None, upper=None) -> None:
        self.name = name
        self.value = value
        self.lower = lower
        self.upper = upper

        if lower is not None and upper is not None:
            bounds = f"[{lower}, {upper}]"
        elif lower is not None:
            bounds = f">= {lower}"
        else:
            bounds = f"<= {upper}"
        super().__init__(f"{name} must be in {bounds}, got {value!r}.")


class InvalidEnumError(ValidationError):
    """Raised when one or more values are not members of a fixed catalog."""

    # Keep messages readable for the ~hundreds of category aliases.
    MAX_ALLOWED_IN_MESSAGE = 20

    def __init__(self, name: str, invalid: Iterable, allowed: Iterable) -> None:
        self.name = name
        self.invalid: List = list(invalid)
        self.allowed: List = sorted(allowed, key=str)

        shown = ", ".join(repr(v) for v in self.allowed[: self.MAX_ALLOWED_IN_MESSAGE])
        if len(self.allowed) > self.MAX_ALLOWED_IN_MESSAGE:
            shown += f", ... ({len(self.allowed)} values in total)"
        super().__init__(
            f"Invalid {name}: {', '.join(repr(v) for v in self.invalid)}. "
            f"Allowed values: {shown}"
        )


class InvalidTypeError(ValidationError, TypeError):
    """Raised when a criterion has the wrong type (e.g. open_now is not a bool)."""


class ConfigError(YelpSearchError):
    """Raised when required environment configuration is invalid."""


class MalformedResponseError(YelpSearchError):
    """Raised when the response JSON does not have the expected shape."""

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        self.index = index
        if index is not None:
            message = f"Business #{index}: {message}"
        super().__init__(message)
