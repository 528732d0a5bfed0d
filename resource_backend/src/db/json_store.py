"""
JSON file persistence for the resource collection.

The whole collection lives in a single JSON array. Every read loads the full
document and every write replaces it. The document (and its parent directory)
is created lazily on first access.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from ..core.logger import get_logger

logger = get_logger(__name__)


class StoreParseError(ValueError):
    """Raised when the persisted document is not a valid JSON array."""


# PUBLIC_INTERFACE
class JsonStore:
    """Whole-document JSON store backed by a single file."""

    def __init__(self, file_path: Union[str, Path]):
        self._path = Path(file_path)

    @property
    def path(self) -> Path:
        return self._path

    # PUBLIC_INTERFACE
    def ensure_store(self) -> None:
        """Create the parent directory and an empty-array document if no document exists."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if self._path.exists():
            return
        self._path.write_text(json.dumps([], indent=2), encoding="utf-8")
        logger.info("Initialized empty resource store", extra={"path": str(self._path)})

    # PUBLIC_INTERFACE
    def read_all(self) -> List[Dict[str, Any]]:
        """Load the full collection. A blank document is an empty collection."""
        self.ensure_store()
        raw = self._path.read_text(encoding="utf-8")
        if not raw.strip():
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StoreParseError(f"Resource store {self._path} is not valid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise StoreParseError(f"Resource store {self._path} must contain a JSON array.")
        logger.debug("Loaded resource store", extra={"path": str(self._path), "count": len(data)})
        return data

    # PUBLIC_INTERFACE
    def write_all(self, items: List[Dict[str, Any]]) -> None:
        """Overwrite the document with the given collection.

        The content goes to a sibling temp file first and is then swapped in, so a
        reader never observes a half-written document.
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(items, f, indent=2, ensure_ascii=False, allow_nan=False)
        tmp.replace(self._path)
