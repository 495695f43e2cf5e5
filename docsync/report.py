"""Sync results: differences found and Japanese text still left to translate."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from . import contains_japanese
from .document_model import ROOT, Document, DocumentPath
from .field_classifier import FieldClassifier


def find_untranslated(tree: Document, path: DocumentPath = ROOT) -> list:
    """Return ``(path, text)`` for every string leaf still containing Japanese."""
    found = []
    if isinstance(tree, dict):
        for key, value in tree.items():
            found.extend(find_untranslated(value, path.child(key)))
    elif isinstance(tree, list):
        for i, item in enumerate(tree):
            found.extend(find_untranslated(item, path.index(i)))
    elif isinstance(tree, str) and contains_japanese(tree):
        found.append((path, tree))
    return found


def count_untranslated(tree: Document) -> int:
    return len(find_untranslated(tree))


def _parent_key(path: DocumentPath) -> str:
    """Nearest mapping key above the field itself."""
    return "" if path.is_root else DocumentPath(path.segments[:-1]).last_key


@dataclass
class SyncReport:
    """Outcome of one synchronization run."""
    differences: list = field(default_factory=list)
    untranslated: list = field(default_factory=list)   # (DocumentPath, str)
    translations_applied: int = 0
    dry_run: bool = False
    target_path: str = ""
    saved: bool = False

    @property
    def difference_count(self) -> int:
        return len(self.differences)

    @property
    def untranslated_count(self) -> int:
        return len(self.untranslated)

    def counts_by_kind(self) -> dict:
        return dict(Counter(d.kind.value for d in self.differences))

    def untranslated_by_classification(self, classifier: Optional[FieldClassifier] = None) -> dict:
        """Group the remaining Japanese leaves by how their field is classified."""
        classifier = classifier or FieldClassifier()
        counts = Counter()
        for path, text in self.untranslated:
            tag = classifier.classify(path.last_key, text, parent=_parent_key(path))
            counts[tag] += 1
        return dict(counts)

    def summary_lines(self, limit: int = 10) -> list:
        lines = [f"Found {self.difference_count} structural differences"]
        if self.differences:
            lines.append("")
            lines.append("Structural differences found:")
            for diff in self.differences[:limit]:
                lines.append(f"  - {diff}")
            if self.difference_count > limit:
                lines.append(f"  ... and {self.difference_count - limit} more")
        lines.append("")
        if self.dry_run:
            lines.append("DRY RUN: Not saving changes")
            lines.append(f"Would update {self.target_path}")
        elif self.saved:
            lines.append(f"Synchronization complete: {self.target_path}")
            lines.append(f"Next step: Review and translate Japanese content in {self.target_path}")
        lines.append(f"Automatic translations applied: {self.translations_applied}")
        lines.append(f"Fields requiring translation: {self.untranslated_count}")
        return lines

    def to_dict(self) -> dict:
        return {
            "differences": [d.to_dict() for d in self.differences],
            "untranslated": [{"path": str(p), "value": v} for p, v in self.untranslated],
            "translationsApplied": self.translations_applied,
            "dryRun": self.dry_run,
            "targetPath": self.target_path,
            "saved": self.saved,
        }
