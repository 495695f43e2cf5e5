"""Field classification: decide how each named field should be handled.

A field is either translated, preserved verbatim (dates, contact details,
tech stacks), or handled by a named special rule such as
``use_english_name`` for companies.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from . import contains_japanese

TRANSLATE = "translate"
PRESERVE = "preserve"

TRANSLATE_FIELDS = ("summary", "title", "responsibilities", "description", "notes")
PRESERVE_FIELDS = ("start_date", "end_date", "date", "email", "phone",
                   "location", "url", "gpa", "tech")
SPECIAL_FIELDS = {
    "company": "use_english_name",
    "name": "already_handled",
    "name_en": "already_handled",
    "certifications.name": "official_english",
}


@dataclass(frozen=True)
class ClassificationRules:
    translate: frozenset = field(default_factory=lambda: frozenset(TRANSLATE_FIELDS))
    preserve: frozenset = field(default_factory=lambda: frozenset(PRESERVE_FIELDS))
    special: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(SPECIAL_FIELDS)))

    @classmethod
    def with_overrides(cls, translate=None, preserve=None,
                       special: Optional[Mapping[str, str]] = None) -> "ClassificationRules":
        """Extend the default rules with extra field names / special rules."""
        merged_special = dict(SPECIAL_FIELDS)
        merged_special.update(special or {})
        return cls(
            translate=frozenset(TRANSLATE_FIELDS) | frozenset(translate or ()),
            preserve=frozenset(PRESERVE_FIELDS) | frozenset(preserve or ()),
            special=MappingProxyType(merged_special),
        )


class FieldClassifier:
    """Classify fields by name, falling back to the content of the value."""

    def __init__(self, rules: Optional[ClassificationRules] = None):
        self.rules = rules or ClassificationRules()

    def classify(self, field_name: str, value: Any = None, parent: str = "") -> str:
        """Return ``translate``, ``preserve`` or a special-rule tag.

        Args:
            field_name: Plain key of the field, e.g. ``"name"``.
            value: The field's value; only used by the fallback.
            parent: Key of the enclosing section, e.g. ``"certifications"``.
                ``parent.field_name`` is looked up in the special rules
                before the plain name.
        """
        if field_name in self.rules.translate:
            return TRANSLATE
        if field_name in self.rules.preserve:
            return PRESERVE
        if parent:
            rule = self.rules.special.get(f"{parent}.{field_name}")
            if rule is not None:
                return rule
        rule = self.rules.special.get(field_name)
        if rule is not None:
            return rule
        if isinstance(value, str) and contains_japanese(value):
            return TRANSLATE
        return PRESERVE
