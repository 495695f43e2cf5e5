"""docsync: keeps a localized JSON document in step with its source."""

import re

# Hiragana, Katakana and CJK Unified Ideographs
JAPANESE_RE = re.compile(r'[\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FFF]')


def contains_japanese(text: str) -> bool:
    """Check if text contains any Japanese characters."""
    return bool(JAPANESE_RE.search(text))


def is_localized(value) -> bool:
    """A string with no Japanese characters left in it."""
    return isinstance(value, str) and not contains_japanese(value)
