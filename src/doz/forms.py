"""Form containers for the ``form_data``, ``file`` and ``mime`` rules.

Doz does not read request bodies. Build a ``FormData`` from whatever
your framework parsed, or hand the framework's own form object to
``rules.form_data`` if it already has ``get_list``::

    form = FormData.from_pairs([
        ("email", "a@example.com"),
        ("tag", "python"),
        ("tag", "web"),
        ("avatar", UploadFile.from_bytes("me.png", png_bytes, "image/png")),
    ])
    rules.form_data(form, {"email": rules.email, "avatar": rules.file})
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class UploadFile:
    """An uploaded file: the metadata the rules check, plus its bytes."""

    filename: str
    content_type: str
    size: int
    content: bytes = field(default=b"", repr=False)

    @classmethod
    def from_bytes(
        cls,
        filename: str,
        content: bytes,
        content_type: str = "application/octet-stream",
    ) -> UploadFile:
        """Build an upload whose ``size`` matches *content*."""
        return cls(filename, content_type, len(content), content)

    def __repr__(self) -> str:
        return f"UploadFile({self.filename!r}, {self.content_type!r}, {self.size} bytes)"


class FormData(Mapping[str, str]):
    """Read-only multi-value form fields plus uploaded files.

    Indexing yields a field's first value and ``get_list`` all of them.
    A field given no values is not stored, so every key present has a
    first value. Files live apart from text fields, under ``files``.
    """

    __slots__ = ("_fields", "_files")

    def __init__(
        self,
        fields: Mapping[str, Iterable[str]] | None = None,
        files: Mapping[str, UploadFile] | None = None,
    ) -> None:
        self._fields: dict[str, tuple[str, ...]] = {}
        for name, values in (fields or {}).items():
            kept = tuple(values)
            if kept:
                self._fields[name] = kept
        self._files: dict[str, UploadFile] = dict(files or {})

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str | UploadFile]]) -> FormData:
        """Build form data from ``(name, value)`` pairs in submission order.

        Repeated text fields keep every value; for files the last one wins.
        """
        fields: dict[str, list[str]] = {}
        files: dict[str, UploadFile] = {}
        for name, value in pairs:
            if isinstance(value, UploadFile):
                files[name] = value
            else:
                fields.setdefault(name, []).append(value)
        return cls(fields, files)

    @property
    def files(self) -> Mapping[str, UploadFile]:
        return self._files

    def __getitem__(self, key: str) -> str:
        return self._fields[key][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def get_list(self, key: str) -> list[str]:
        """All values submitted for *key*, empty if none."""
        return list(self._fields.get(key, ()))

    def __repr__(self) -> str:
        shown = {name: list(values) for name, values in self._fields.items()}
        if self._files:
            return f"FormData({shown!r}, files={sorted(self._files)!r})"
        return f"FormData({shown!r})"
