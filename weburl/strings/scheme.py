from typing import cast, get_args, Literal

from weburl.core.exceptions import InvalidSchemeError

UrlScheme = Literal["http", "https", "mailto"]
VALID_SCHEMES: tuple[str, ...] = get_args(UrlScheme)


def sanitize_scheme(scheme: str) -> UrlScheme:
    """
    Lowercase `scheme` and check that it is one of the supported schemes.
    Raises `InvalidSchemeError`, carrying the value as given, otherwise.
    """
    normalized = scheme.lower()
    if normalized not in VALID_SCHEMES:
        raise InvalidSchemeError(scheme, VALID_SCHEMES)
    return cast(UrlScheme, normalized)
