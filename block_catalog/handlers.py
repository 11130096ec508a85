from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from block_catalog.catalog import SOURCE_EMBEDDED, Catalog
from block_catalog.discovery import DEFAULT_FILENAME

logger = logging.getLogger(__name__)

LIST_MODE = "metadata-only"


def to_json_text(obj: Any) -> str:
    return json.dumps(obj, indent=2, ensure_ascii=False)


class BlockCatalogHandlers:
    """
    The two read-only queries over an already-loaded catalog.

    `catalog` is None when no catalog could be loaded; both queries still
    answer (with a notice / error envelope) instead of raising.
    """

    def __init__(self, catalog: Optional[Catalog], filename: str = DEFAULT_FILENAME):
        self.catalog = catalog
        self.filename = filename

    @property
    def available(self) -> bool:
        return self.catalog is not None

    def info(self) -> Dict[str, Any]:
        if self.catalog is None:
            return {"available": False, "source": None, "path": None, "total": 0, "loaded_at": None}
        return self.catalog.info()

    # -------- describe catalog --------

    def describe_text(self) -> str:
        """Full catalog as indented JSON, or a human-readable notice."""
        try:
            if self.catalog is None:
                return f"{self.filename} not found. No blocks metadata available."
            return to_json_text(self.catalog.to_records())
        except Exception as e:
            logger.exception("describe catalog failed")
            return f"Error loading blocks metadata: {e}"

    def describe_catalog(self) -> Dict[str, Any]:
        """Assistant-style message: {"role": "assistant", "content": {"type": "text", "text": ...}}"""
        return {"role": "assistant", "content": {"type": "text", "text": self.describe_text()}}

    # -------- list blocks --------

    def list_blocks(self) -> Dict[str, Any]:
        try:
            if self.catalog is None:
                return self._unavailable_envelope()
            blocks = [b.to_listing() for b in self.catalog.blocks]
            payload: Dict[str, Any] = {
                "blocks": blocks,
                "total": len(blocks),
                "mode": LIST_MODE,
                "message": self._source_message(self.catalog),
                "source": self.catalog.source,
            }
            if self.catalog.path is not None:
                payload["path"] = str(self.catalog.path)
            return payload
        except Exception as e:
            logger.exception("list blocks failed")
            return {"error": "Failed to list blocks", "details": str(e)}

    def list_blocks_text(self) -> str:
        return to_json_text(self.list_blocks())

    # -------- internals --------

    def _unavailable_envelope(self) -> Dict[str, Any]:
        return {
            "error": f"{self.filename} not found",
            "suggestion": (
                f"Place {self.filename} in the server directory or one of its parent "
                f"directories, or start the server with --mode embedded"
            ),
            "cwd": os.getcwd(),
        }

    @staticmethod
    def _source_message(catalog: Catalog) -> str:
        if catalog.source == SOURCE_EMBEDDED:
            return "Using embedded blocks metadata for analysis"
        return f"Loaded blocks metadata from {catalog.path}"
