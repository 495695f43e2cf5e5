"""Data model for JSON documents, paths inside them, and their differences."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

# A JSON value: mapping, sequence or scalar.
Document = Union[dict, list, str, int, float, bool, None]

KIND_NULL = "null"
KIND_BOOLEAN = "boolean"
KIND_NUMBER = "number"
KIND_STRING = "string"
KIND_MAPPING = "mapping"
KIND_SEQUENCE = "sequence"


def kind_of(value: Document) -> str:
    """Return the runtime kind of a JSON value.

    ``bool`` is checked before numbers since it subclasses ``int``.
    """
    if value is None:
        return KIND_NULL
    if isinstance(value, bool):
        return KIND_BOOLEAN
    if isinstance(value, (int, float)):
        return KIND_NUMBER
    if isinstance(value, str):
        return KIND_STRING
    if isinstance(value, dict):
        return KIND_MAPPING
    if isinstance(value, list):
        return KIND_SEQUENCE
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def is_container(value: Document) -> bool:
    return isinstance(value, (dict, list))


def strictly_equal(a: Document, b: Document) -> bool:
    """Equality that never treats ``True`` as ``1`` or ``"1"`` as ``1``."""
    return kind_of(a) == kind_of(b) and a == b


@dataclass(frozen=True)
class DocumentPath:
    """Location inside a document: a tuple of keys (str) and indices (int)."""
    segments: tuple = ()

    def child(self, key: str) -> "DocumentPath":
        return DocumentPath(self.segments + (key,))

    def index(self, i: int) -> "DocumentPath":
        return DocumentPath(self.segments + (i,))

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def last_key(self) -> str:
        """Innermost mapping key, skipping any trailing indices."""
        for seg in reversed(self.segments):
            if isinstance(seg, str):
                return seg
        return ""

    def __str__(self) -> str:
        if self.is_root:
            return "root"
        parts = []
        for seg in self.segments:
            if isinstance(seg, int):
                parts.append(f"[{seg}]")
            elif parts:
                parts.append(f".{seg}")
            else:
                parts.append(seg)
        return "".join(parts)


ROOT = DocumentPath()


class DiffKind(str, Enum):
    VALUE_MISMATCH = "value_mismatch"
    MISSING = "missing"
    TYPE_MISMATCH = "type_mismatch"
    ARRAY_LENGTH_MISMATCH = "array_length_mismatch"
    EXTRA = "extra"


@dataclass
class Difference:
    """One discrepancy between the source and target documents.

    Not hashable: the recorded values may be mappings or sequences.
    """
    path: DocumentPath
    kind: DiffKind
    source_value: Any = None
    target_value: Any = None
    source_length: Optional[int] = None
    target_length: Optional[int] = None

    def to_dict(self) -> dict:
        """Serialize, keeping only the fields that mean something for the kind."""
        data = {"path": str(self.path), "type": self.kind.value}
        if self.kind == DiffKind.ARRAY_LENGTH_MISMATCH:
            data["sourceLength"] = self.source_length
            data["targetLength"] = self.target_length
            return data
        if self.kind != DiffKind.EXTRA:
            data["sourceValue"] = self.source_value
        if self.kind != DiffKind.MISSING:
            data["targetValue"] = self.target_value
        return data

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.path}"
