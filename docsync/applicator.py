"""Apply the static translation tables to known fields of a document, in place."""

import logging
from typing import Optional

from .document_model import Document
from .translation_tables import TranslationTables

log = logging.getLogger(__name__)

CERTIFICATIONS_KEY = "certifications"


class TranslationApplicator:
    """Rewrites ``company``, ``title`` and certification ``name`` fields.

    Fields are matched by name at any depth.  A ``name`` only counts as a
    certification name when some ancestor is keyed ``certifications``.
    Other strings are left alone even if they are still Japanese.
    """

    def __init__(self, tables: Optional[TranslationTables] = None):
        self.tables = tables or TranslationTables()

    def apply(self, tree: Document) -> int:
        """Translate the tree in place; return the number of values changed."""
        if isinstance(tree, dict):
            return self._apply_mapping(tree, False)
        if isinstance(tree, list):
            return self._apply_sequence(tree, False)
        return 0

    def _apply_mapping(self, obj: dict, in_certifications: bool) -> int:
        changed = 0
        for key, value in obj.items():
            if isinstance(value, str):
                translated = self._translate_field(key, value, in_certifications)
                if translated != value:
                    log.debug("Translated %s: %r -> %r", key, value, translated)
                    obj[key] = translated
                    changed += 1
                continue

            nested = in_certifications or key == CERTIFICATIONS_KEY
            if isinstance(value, dict):
                changed += self._apply_mapping(value, nested)
            elif isinstance(value, list):
                changed += self._apply_sequence(value, nested)
        return changed

    def _apply_sequence(self, items: list, in_certifications: bool) -> int:
        changed = 0
        for item in items:
            if isinstance(item, dict):
                changed += self._apply_mapping(item, in_certifications)
        return changed

    def _translate_field(self, key: str, value: str, in_certifications: bool) -> str:
        if key == "company":
            return self.tables.translate_company(value)
        if key == "title":
            return self.tables.translate_title(value)
        if key == "name" and in_certifications:
            return self.tables.translate_certification(value)
        return value
