"""Error taxonomy for SWAPI aggregation.

Every failure of a single request surfaces as one of these types, so
callers only need to catch `SwapiError`.
"""

from __future__ import annotations


class SwapiError(Exception):
    """Base exception for all aggregation failures."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class FetchError(SwapiError):
    """Raised for transport failures or non-success HTTP statuses."""

    def __init__(self, url: str, *, status_code: int | None = None, reason: str | None = None) -> None:
        if status_code is not None:
            message = f"GET {url} returned HTTP {status_code}"
        else:
            message = f"GET {url} failed: {reason or 'network error'}"
        super().__init__(message, url=url)
        self.status_code = status_code


class DecodeError(SwapiError):
    """Raised when a response body does not match the expected entity shape."""

    def __init__(self, url: str, *, entity: str, reason: str) -> None:
        super().__init__(f"Could not decode {entity} from {url}: {reason}", url=url)
        self.entity = entity
