"""Command-line front end for the sync engine."""

import argparse
import json
import logging
import sys

from .field_classifier import FieldClassifier
from .settings import SETTINGS_FILE, load_settings
from .storage import DocumentError
from .sync_engine import SyncEngine

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsync",
        description="Synchronize a localized JSON document with its source document.",
    )
    parser.add_argument("--source", help="source (Japanese) document")
    parser.add_argument("--target", help="localized (English) document, rewritten in place")
    parser.add_argument("--settings", default=SETTINGS_FILE,
                        help=f"settings file (default: {SETTINGS_FILE})")
    parser.add_argument("--dry-run", action="store_true",
                        help="report differences without saving")
    parser.add_argument("--json", action="store_true", dest="as_json",
                        help="print the report as JSON")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="show debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(args.settings)
    if args.source:
        settings.source_path = args.source
    if args.target:
        settings.target_path = args.target

    try:
        report = SyncEngine(settings).run(dry_run=args.dry_run)
    except DocumentError as e:
        log.error("Sync failed: %s", e)
        return 1

    if args.as_json:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
        return 0

    for line in report.summary_lines(settings.preview_limit):
        print(line)
    by_tag = report.untranslated_by_classification(FieldClassifier(settings.rules))
    for tag, count in sorted(by_tag.items()):
        print(f"  {tag}: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
