"""Sync engine: orchestrates load, compare, synchronize, translate and save."""

import logging
from typing import Optional

from .applicator import TranslationApplicator
from .comparator import compare
from .report import SyncReport, find_untranslated
from .settings import SyncSettings
from .storage import load_document, save_document
from .synchronizer import synchronize

log = logging.getLogger(__name__)


class SyncEngine:
    """Brings the localized document in line with the source document.

    The target file is either rewritten as a whole or, in a dry run,
    left untouched.  Load and save errors propagate to the caller.
    """

    def __init__(self, settings: Optional[SyncSettings] = None):
        self.settings = settings or SyncSettings()
        self.applicator = TranslationApplicator(self.settings.tables)

    def run(self, dry_run: bool = False) -> SyncReport:
        settings = self.settings

        log.info("Loading source: %s", settings.source_path)
        source = load_document(settings.source_path)
        log.info("Loading target: %s", settings.target_path)
        target = load_document(settings.target_path)

        log.info("Analyzing differences...")
        differences = compare(source, target)
        log.info("Found %d structural differences", len(differences))

        log.info("Applying structural synchronization...")
        synchronized = synchronize(source, target)

        log.info("Applying automatic translations...")
        applied = self.applicator.apply(synchronized)

        report = SyncReport(
            differences=differences,
            untranslated=find_untranslated(synchronized),
            translations_applied=applied,
            dry_run=dry_run,
            target_path=settings.target_path,
        )

        if dry_run:
            log.info("DRY RUN: not saving %s", settings.target_path)
        else:
            save_document(settings.target_path, synchronized, indent=settings.indent)
            report.saved = True

        log.info("Fields requiring translation: %d", report.untranslated_count)
        return report
