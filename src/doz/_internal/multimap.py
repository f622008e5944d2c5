"""Structural types for the form and file rules.

Rules test their input against these protocols instead of importing
``doz.forms``, so a web framework's own form and upload objects pass
as long as they have the same shape.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """Read-only form fields where a name may carry several values.

    Indexing and ``get`` give the first value; ``get_list`` gives all.
    A plain ``dict`` lacks ``get_list`` and does not match.
    """

    def __getitem__(self, key: str) -> str: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: str | None = None) -> str | None: ...
    def get_list(self, key: str) -> list[str]: ...


@runtime_checkable
class FileLike(Protocol):
    """Upload metadata. Rules never read the content."""

    filename: str
    content_type: str
    size: int
