"""JSON-based caption style save / load (one document per key)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable

from PySide6.QtCore import QIODevice, QSaveFile

from mememaker.models.text_style import StyleParseError, TextStyle
from mememaker.utils.paths import documents_path_for_file_name

logger = logging.getLogger(__name__)

PathResolver = Callable[[str], Path]


class TextStyleStore:
    """Loads and saves caption styles as JSON documents.

    Each key maps to one file through *path_resolver* (default:
    ``documents_path_for_file_name``). Writes go through ``QSaveFile`` so an
    interrupted save never leaves a truncated document behind.
    """

    def __init__(self, path_resolver: PathResolver | None = None):
        self._resolve = path_resolver or documents_path_for_file_name

    def path_for(self, name: str) -> Path:
        """Return the file backing *name*."""
        return self._resolve(name)

    def exists(self, name: str) -> bool:
        """Check if a style document is stored under *name*."""
        return self._resolve(name).is_file()

    def load(self, name: str) -> TextStyle:
        """Load the style stored under *name*.

        A missing document is not an error: a default style with empty text
        is returned.

        Raises:
            StyleParseError: if the document is not valid JSON or a required
                key is missing or has the wrong type.
            OSError: if the document path cannot be resolved or read.
        """
        path = self._resolve(name)
        if not path.is_file():
            logger.debug(f"No style document for '{name}', using defaults")
            return TextStyle()

        raw = path.read_bytes()
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:  # JSONDecodeError, UnicodeDecodeError, nesting depth
            raise StyleParseError("<document>", f"invalid JSON in {path.name}: {e}") from e
        return TextStyle.from_dict(data)

    def load_or_default(self, name: str) -> TextStyle:
        """Load the style stored under *name*, falling back to defaults on any storage error."""
        try:
            return self.load(name)
        except StyleParseError as e:
            logger.warning(f"Style document '{name}' could not be parsed ({e}); using defaults")
        except OSError:
            logger.exception(f"Failed to read style document '{name}'")
        return TextStyle()

    def save(self, name: str, style: TextStyle) -> bool:
        """Write *style* under *name*, replacing any previous document.

        Returns:
            True if the document was written, False if encoding or writing
            failed (the failure is logged and any previous document is kept).
        """
        try:
            payload = json.dumps(style.to_dict(), ensure_ascii=False, indent=2, allow_nan=False)
        except (TypeError, ValueError):
            logger.exception(f"Cannot encode style '{name}'")
            return False

        try:
            path = self._resolve(name)
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            logger.exception(f"Cannot resolve storage path for style '{name}'")
            return False

        data = payload.encode("utf-8")
        save_file = QSaveFile(str(path))
        if not save_file.open(QIODevice.OpenModeFlag.WriteOnly):
            logger.error(f"Cannot open {path} for writing: {save_file.errorString()}")
            return False

        if save_file.write(data) != len(data):
            logger.error(f"Short write to {path}: {save_file.errorString()}")
            save_file.cancelWriting()
            return False

        if not save_file.commit():
            logger.error(f"Failed to commit {path}: {save_file.errorString()}")
            return False

        logger.debug(f"Saved style '{name}' to {path}")
        return True

    def delete(self, name: str) -> bool:
        """Delete the document stored under *name*.

        Returns:
            True if a document was removed, False if none existed.
        """
        path = self._resolve(name)
        if not path.is_file():
            return False
        path.unlink()
        return True
