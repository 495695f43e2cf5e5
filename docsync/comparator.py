"""Recursive comparison of two JSON documents.

Produces an ordered list of :class:`Difference` records: at each level the
source keys come first in encounter order, then any keys found only in the
target.  Neither document is modified.
"""

from .document_model import (
    ROOT,
    DiffKind,
    Difference,
    Document,
    DocumentPath,
    is_container,
    kind_of,
    strictly_equal,
)


def compare(source: Document, target: Document) -> list[Difference]:
    """Return every structural and value difference between two documents."""
    differences: list[Difference] = []
    _compare_node(source, target, ROOT, differences)
    return differences


def _compare_node(source, target, path: DocumentPath, out: list):
    """Compare a root value or an array element."""
    if not (is_container(source) and is_container(target)):
        if not strictly_equal(source, target):
            out.append(Difference(path, DiffKind.VALUE_MISMATCH,
                                  source_value=source, target_value=target))
        return

    if isinstance(source, dict) and isinstance(target, dict):
        _compare_mappings(source, target, path, out)
    elif isinstance(source, list) and isinstance(target, list):
        _compare_sequences(source, target, path, out)
    else:
        out.append(Difference(path, DiffKind.TYPE_MISMATCH,
                              source_value=source, target_value=target))


def _compare_mappings(source: dict, target: dict, path: DocumentPath, out: list):
    for key, src_val in source.items():
        key_path = path.child(key)

        if key not in target:
            out.append(Difference(key_path, DiffKind.MISSING, source_value=src_val))
            continue

        tgt_val = target[key]
        if src_val is None or tgt_val is None:
            if src_val is not tgt_val:
                out.append(Difference(key_path, DiffKind.VALUE_MISMATCH,
                                      source_value=src_val, target_value=tgt_val))
        elif kind_of(src_val) != kind_of(tgt_val):
            out.append(Difference(key_path, DiffKind.TYPE_MISMATCH,
                                  source_value=src_val, target_value=tgt_val))
        elif isinstance(src_val, list):
            _compare_sequences(src_val, tgt_val, key_path, out)
        elif isinstance(src_val, dict):
            _compare_mappings(src_val, tgt_val, key_path, out)
        elif src_val != tgt_val:
            out.append(Difference(key_path, DiffKind.VALUE_MISMATCH,
                                  source_value=src_val, target_value=tgt_val))

    for key, tgt_val in target.items():
        if key not in source:
            out.append(Difference(path.child(key), DiffKind.EXTRA, target_value=tgt_val))


def _compare_sequences(source: list, target: list, path: DocumentPath, out: list):
    if len(source) != len(target):
        out.append(Difference(path, DiffKind.ARRAY_LENGTH_MISMATCH,
                              source_length=len(source), target_length=len(target)))
    # Only the overlapping prefix is compared
    for i in range(min(len(source), len(target))):
        _compare_node(source[i], target[i], path.index(i), out)
