from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from common.types import BlockDescriptor, IsoTime, now_iso
from block_catalog.discovery import DEFAULT_FILENAME, DEFAULT_MAX_DEPTH, find_catalog_file
from block_catalog.embedded import BLOCKS_METADATA

logger = logging.getLogger(__name__)

SOURCE_EMBEDDED = "embedded-data"
SOURCE_FILE = "blocks-file"

MODES = ("auto", "file", "embedded")


class CatalogError(ValueError):
    """Catalog content could not be turned into block descriptors."""


@dataclass(frozen=True)
class Catalog:
    """
    Immutable, ordered block catalog loaded once at startup.

    `path` is set only for file-backed catalogs.
    """
    blocks: Tuple[BlockDescriptor, ...]
    source: str
    path: Optional[Path] = None
    loaded_at: IsoTime = field(default_factory=now_iso)

    def __len__(self) -> int:
        return len(self.blocks)

    @property
    def names(self) -> List[str]:
        return [b.name for b in self.blocks]

    def to_records(self) -> List[Dict[str, Any]]:
        return [b.to_dict() for b in self.blocks]

    def info(self) -> Dict[str, Any]:
        return {
            "available": True,
            "source": self.source,
            "path": str(self.path) if self.path else None,
            "total": len(self.blocks),
            "loaded_at": self.loaded_at,
        }


def parse_blocks(data: Any) -> Tuple[BlockDescriptor, ...]:
    """Validate a decoded blocks.json value. Raises CatalogError."""
    if not isinstance(data, list):
        raise CatalogError("catalog must be a JSON array of block objects")
    blocks: List[BlockDescriptor] = []
    seen = set()
    for i, entry in enumerate(data):
        try:
            b = BlockDescriptor.from_dict(entry)
        except (TypeError, ValueError) as e:
            raise CatalogError(f"entry {i}: {e}") from e
        if b.name in seen:
            raise CatalogError(f"entry {i}: duplicate block name {b.name!r}")
        seen.add(b.name)
        blocks.append(b)
    return tuple(blocks)


def read_catalog_file(path: Union[str, Path]) -> Catalog:
    """Read and parse a blocks.json file. Raises CatalogError."""
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogError(f"{p}: invalid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise CatalogError(f"{p}: not valid UTF-8: {e}") from e
    except OSError as e:
        raise CatalogError(f"{p}: cannot read: {e}") from e
    try:
        blocks = parse_blocks(data)
    except CatalogError as e:
        raise CatalogError(f"{p}: {e}") from e
    return Catalog(blocks=blocks, source=SOURCE_FILE, path=p.resolve())


class CatalogProvider:
    """Produces a Catalog, or None when no catalog is available."""

    name = "provider"

    def load(self) -> Optional[Catalog]:  # pragma: no cover - interface
        raise NotImplementedError


class EmbeddedCatalogProvider(CatalogProvider):
    """Serves the literal compiled into block_catalog.embedded. Never fails."""

    name = "embedded"

    def __init__(self, records: Iterable[Dict[str, Any]] = BLOCKS_METADATA):
        self.records = tuple(records)

    def load(self) -> Catalog:
        return Catalog(blocks=parse_blocks(list(self.records)), source=SOURCE_EMBEDDED)


class FileCatalogProvider(CatalogProvider):
    """
    Locates `filename` in `search_root` or one of its ancestors (bounded by
    `max_depth`) and parses it. Missing or malformed files resolve to None.
    """

    name = "file"

    def __init__(
        self,
        search_root: Optional[Union[str, Path]] = None,
        filename: str = DEFAULT_FILENAME,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.search_root = search_root
        self.filename = filename
        self.max_depth = int(max_depth)

    def load(self) -> Optional[Catalog]:
        path = find_catalog_file(self.search_root, self.filename, self.max_depth)
        if path is None:
            logger.warning(
                "%s not found within %d parent directories", self.filename, self.max_depth,
                extra={"extra": {"search_root": str(self.search_root) if self.search_root else None}},
            )
            return None
        try:
            catalog = read_catalog_file(path)
        except CatalogError as e:
            logger.error("Failed to load %s: %s", self.filename, e)
            return None
        logger.info("Found %s at %s", self.filename, path)
        return catalog


def build_providers(
    mode: str = "auto",
    search_root: Optional[Union[str, Path]] = None,
    filename: str = DEFAULT_FILENAME,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> List[CatalogProvider]:
    """Provider chain for a catalog mode, in order of preference."""
    if mode not in MODES:
        raise ValueError(f"unknown catalog mode {mode!r}; expected one of {', '.join(MODES)}")
    providers: List[CatalogProvider] = []
    if mode in ("auto", "file"):
        providers.append(FileCatalogProvider(search_root, filename, max_depth))
    if mode in ("auto", "embedded"):
        providers.append(EmbeddedCatalogProvider())
    return providers


def load_catalog(
    mode: str = "auto",
    search_root: Optional[Union[str, Path]] = None,
    filename: str = DEFAULT_FILENAME,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Optional[Catalog]:
    """
    Compose the startup catalog:
      - "auto": blocks.json if one is found and valid, else the embedded literal
      - "file": blocks.json only (None if unavailable)
      - "embedded": the embedded literal only
    """
    for provider in build_providers(mode, search_root, filename, max_depth):
        catalog = provider.load()
        if catalog is not None:
            return catalog
        logger.info("Catalog provider '%s' had no catalog", provider.name)
    return None
