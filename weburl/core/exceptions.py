from typing import Literal


UrlErrorKind = Literal["invalid", "malformed"]
"""
- "invalid": a well-formed value that is not accepted (scheme 'ftp', segment 0).
- "malformed": input that cannot be split into URL components at all.
"""


class UrlError(ValueError):
    """
    Base class of the errors raised while parsing or transforming a `Url`.

    NOTE: A `ValueError`, so that Pydantic reports it as a validation error for
    `Url` fields decoded from strings.
    """

    error_kind: UrlErrorKind = "invalid"


class InvalidSchemeError(UrlError):
    """Raised when a scheme is not one of the supported schemes."""

    def __init__(self, rejected_value: str, valid_schemes: tuple[str, ...]) -> None:
        super().__init__(
            f"invalid scheme '{rejected_value}': "
            f"expected one of {', '.join(valid_schemes)}"
        )
        self.rejected_value = rejected_value


class MalformedUrlError(UrlError):
    """
    Raised when the input cannot be split into URL components, for example,
    because of unbalanced IPv6 brackets or a port that is not a number.
    """

    error_kind: UrlErrorKind = "malformed"

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"malformed URL '{url}': {reason}")
        self.url = url


class SegmentZeroError(UrlError):
    """
    Raised when reading path segment 0: segments use a 1-based index, or a
    negative index to count from the end.
    """

    def __init__(self) -> None:
        super().__init__(
            "segment 0 does not exist: use a 1-based index, "
            "or a negative index to count from the end"
        )
