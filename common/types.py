from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Any, Dict, Tuple
from datetime import datetime, timezone


IsoTime = str

# (attribute, catalog file key, listing key)
FILE_FIELDS: Tuple[Tuple[str, str, str], ...] = (
    ("js_file", "js_file", "jsFile"),
    ("css_file", "css_file", "cssFile"),
    ("helper_file", "helper_file", "helperFile"),
)


def now_iso() -> IsoTime:
    """UTC timestamp in RFC3339/ISO-8601 with 'Z' suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _opt_str(value: Any, key: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string or null")
    return value


@dataclass(frozen=True, slots=True)
class BlockDescriptor:
    """
    One AEM UI block as listed in blocks.json.

    Attributes:
        name: block name, unique within a catalog.
        description: free-text summary of what the block renders.
        js_file, css_file, helper_file: optional paths relative to the site
            root (e.g. "blocks/form/form.js").
    """
    name: str
    description: str
    js_file: Optional[str] = None
    css_file: Optional[str] = None
    helper_file: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("name must be a non-empty string")
        if not isinstance(self.description, str) or not self.description:
            raise ValueError("description must be a non-empty string")
        for attr, key, _ in FILE_FIELDS:
            _opt_str(getattr(self, attr), key)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "BlockDescriptor":
        """Build from a blocks.json entry. Unknown keys are ignored."""
        if not isinstance(d, dict):
            raise TypeError("block entry must be an object")
        if "name" not in d:
            raise ValueError("block entry is missing 'name'")
        if "description" not in d:
            raise ValueError(f"block {d['name']!r} is missing 'description'")
        return cls(
            name=d["name"],
            description=d["description"],
            js_file=_opt_str(d.get("js_file"), "js_file"),
            css_file=_opt_str(d.get("css_file"), "css_file"),
            helper_file=_opt_str(d.get("helper_file"), "helper_file"),
        )

    @property
    def files(self) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        return (self.js_file, self.css_file, self.helper_file)

    @property
    def file_count(self) -> int:
        return sum(1 for f in self.files if f)

    def to_dict(self) -> Dict[str, Any]:
        """blocks.json shape; absent file fields are omitted."""
        d: Dict[str, Any] = {"name": self.name, "description": self.description}
        for attr, key, _ in FILE_FIELDS:
            value = getattr(self, attr)
            if value is not None:
                d[key] = value
        return d

    def to_listing(self) -> Dict[str, Any]:
        """Normalized record returned by the list_blocks tool."""
        d: Dict[str, Any] = {"name": self.name, "description": self.description}
        for attr, _, listing_key in FILE_FIELDS:
            d[listing_key] = getattr(self, attr) or None
        d["hasCSS"] = bool(self.css_file)
        d["hasJS"] = bool(self.js_file)
        d["hasHelper"] = bool(self.helper_file)
        d["fileCount"] = self.file_count
        return d
