"""Resource fetcher contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The aggregator stays testable with in-memory fakes and independent of the
  HTTP library.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


@runtime_checkable
class ResourceFetcher(Protocol):
    """Minimal contract for loading one API resource.

    Design rules:
    - `fetch` is async because it performs I/O (HTTP).
    - The URL is opaque: implementations request it as given.
    - Failures raise `FetchError` or `DecodeError`, never return partial data.
    """

    async def fetch(self, url: str, model: type[ModelT]) -> ModelT:
        """Fetch `url` and decode the body into `model`."""

        ...
