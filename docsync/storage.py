"""Loading and saving whole JSON documents."""

import json
import logging
import os
import shutil

from .document_model import Document

log = logging.getLogger(__name__)


class DocumentError(Exception):
    """A document could not be read or written.

    Attributes:
        path: Absolute path that was attempted.
        cause: Underlying exception, if any.
    """

    def __init__(self, message: str, path: str, cause: Exception = None):
        super().__init__(message)
        self.path = path
        self.cause = cause


class DocumentNotFoundError(DocumentError):
    pass


class DocumentParseError(DocumentError):
    pass


class DocumentWriteError(DocumentError):
    pass


def load_document(file_path: str) -> Document:
    """Read a JSON document from disk.

    Raises:
        DocumentNotFoundError: The file does not exist.
        DocumentParseError: The file is not valid UTF-8 JSON.
        DocumentError: Any other read failure.
    """
    path = os.path.abspath(file_path)
    if not os.path.isfile(path):
        raise DocumentNotFoundError(f"File not found: {path}", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DocumentParseError(
            f"Invalid JSON in {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            path, e) from e
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"Invalid JSON in {path}: not UTF-8 ({e.reason})", path, e) from e
    except OSError as e:
        raise DocumentError(f"Could not read {path}: {e}", path, e) from e
    log.debug("Loaded %s", path)
    return data


def save_document(file_path: str, data: Document, indent: int = 2) -> str:
    """Write a whole document, replacing the file only once it is fully written.

    Returns:
        The absolute path written.

    Raises:
        DocumentWriteError: The file or its directory could not be written.
    """
    path = os.path.abspath(file_path)
    tmp = path + ".tmp"
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=indent)
            f.write("\n")
        shutil.move(tmp, path)
    except (OSError, TypeError, ValueError) as e:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise DocumentWriteError(f"Could not write {path}: {e}", path, e) from e
    log.info("Saved: %s", path)
    return path
