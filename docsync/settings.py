"""Persistent settings read from ``_settings.json``."""

import json
import logging
from dataclasses import dataclass, field

from .field_classifier import ClassificationRules
from .translation_tables import TranslationTables

log = logging.getLogger(__name__)

SETTINGS_FILE = "_settings.json"

DEFAULT_SOURCE_PATH = "data/master.json"
DEFAULT_TARGET_PATH = "data/master_en.json"
DEFAULT_PREVIEW_LIMIT = 10
DEFAULT_INDENT = 2


@dataclass
class SyncSettings:
    source_path: str = DEFAULT_SOURCE_PATH
    target_path: str = DEFAULT_TARGET_PATH
    preview_limit: int = DEFAULT_PREVIEW_LIMIT   # differences shown in the summary
    indent: int = DEFAULT_INDENT
    tables: TranslationTables = field(default_factory=TranslationTables)
    rules: ClassificationRules = field(default_factory=ClassificationRules)


def _dict_of_str(value) -> dict:
    if not isinstance(value, dict):
        return {}
    return {k: v for k, v in value.items() if isinstance(k, str) and isinstance(v, str)}


def _is_int(value) -> bool:
    """JSON integers only; ``true`` and ``false`` do not count."""
    return isinstance(value, int) and not isinstance(value, bool)


def _list_of_str(value) -> list:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str)]


def load_settings(path: str = SETTINGS_FILE) -> SyncSettings:
    """Load settings, falling back to defaults for anything missing or malformed."""
    settings = SyncSettings()
    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = json.load(f)
    except FileNotFoundError:
        return settings  # no saved settings, use defaults
    except (json.JSONDecodeError, OSError) as e:
        log.warning("Ignoring unreadable settings file %s: %s", path, e)
        return settings
    if not isinstance(cfg, dict):
        log.warning("Ignoring settings file %s: expected a JSON object", path)
        return settings

    if isinstance(cfg.get("source_path"), str):
        settings.source_path = cfg["source_path"]
    if isinstance(cfg.get("target_path"), str):
        settings.target_path = cfg["target_path"]
    if _is_int(cfg.get("preview_limit")) and cfg["preview_limit"] > 0:
        settings.preview_limit = cfg["preview_limit"]
    if _is_int(cfg.get("indent")) and cfg["indent"] >= 0:
        settings.indent = cfg["indent"]

    settings.tables = TranslationTables.with_overrides(
        company=_dict_of_str(cfg.get("company_translations")),
        title=_dict_of_str(cfg.get("title_translations")),
        certification=_dict_of_str(cfg.get("certification_translations")),
    )
    settings.rules = ClassificationRules.with_overrides(
        translate=_list_of_str(cfg.get("translate_fields")),
        preserve=_list_of_str(cfg.get("preserve_fields")),
        special=_dict_of_str(cfg.get("special_fields")),
    )
    log.debug("Loaded settings from %s", path)
    return settings
