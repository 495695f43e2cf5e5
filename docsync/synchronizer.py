"""Structure synchronization: rebuild the target in the source's shape.

The result is a deep copy of the source.  Wherever the target already holds
an English (no Japanese characters) string at the same location, that string
is carried over so hand-made translations survive a resync.
"""

import copy

from . import is_localized
from .document_model import Document, is_container


def synchronize(source: Document, target: Document) -> Document:
    """Return a new document shaped like ``source`` with target translations kept."""
    synchronized = copy.deepcopy(source)
    if isinstance(source, dict) and isinstance(target, dict):
        _preserve_mapping(source, target, synchronized)
    elif isinstance(source, list) and isinstance(target, list):
        _preserve_sequence(source, target, synchronized)
    elif not is_container(source) and is_localized(target):
        return target
    return synchronized


def _preserve_mapping(src: dict, tgt: dict, sync: dict):
    for key, src_val in src.items():
        if key in tgt:
            replacement = _preserve_value(src_val, tgt[key], sync[key])
            if replacement is not None:
                sync[key] = replacement


def _preserve_sequence(src: list, tgt: list, sync: list):
    for i in range(min(len(src), len(tgt))):
        replacement = _preserve_value(src[i], tgt[i], sync[i])
        if replacement is not None:
            sync[i] = replacement


def _preserve_value(src_val, tgt_val, sync_val):
    """Overlay one value in place; return a replacement for scalars, else None."""
    if isinstance(src_val, dict):
        if isinstance(tgt_val, dict):
            _preserve_mapping(src_val, tgt_val, sync_val)
    elif isinstance(src_val, list):
        if isinstance(tgt_val, list):
            _preserve_sequence(src_val, tgt_val, sync_val)
    elif is_localized(tgt_val):
        # Keep existing English
        return tgt_val
    return None
