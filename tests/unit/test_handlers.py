"""
Unit tests for the describe-catalog and list-blocks queries
"""

import pytest
import json
import os
import sys
from pathlib import Path

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.append(project_root)

from block_catalog.catalog import SOURCE_FILE, Catalog, EmbeddedCatalogProvider, load_catalog, parse_blocks
from block_catalog.handlers import BlockCatalogHandlers

SAMPLE = [
    {"name": "Alpha", "description": "All files", "js_file": "a.js", "css_file": "a.css", "helper_file": "a-h.js"},
    {"name": "Beta", "description": "Bare"},
    {"name": "Gamma", "description": "Style only", "css_file": "g.css"},
    {"name": "Delta", "description": "Script and helper", "js_file": "d.js", "helper_file": "d-h.js"},
]


@pytest.fixture
def file_handlers(tmp_path):
    p = tmp_path / "blocks.json"
    p.write_text(json.dumps(SAMPLE), encoding="utf-8")
    return BlockCatalogHandlers(load_catalog("file", search_root=tmp_path, max_depth=0))


@pytest.fixture
def embedded_handlers():
    return BlockCatalogHandlers(EmbeddedCatalogProvider().load())


class _BrokenCatalog:
    """Stands in for a catalog whose records cannot be produced."""
    source = SOURCE_FILE
    path = None

    @property
    def blocks(self):
        raise RuntimeError("disk on fire")

    def to_records(self):
        raise RuntimeError("disk on fire")


class TestListBlocks:
    """Test cases for list_blocks"""

    def test_one_record_per_block(self, file_handlers):
        payload = file_handlers.list_blocks()
        assert payload["total"] == len(payload["blocks"]) == len(SAMPLE)
        for src, rec in zip(SAMPLE, payload["blocks"]):
            expected = sum(1 for k in ("js_file", "css_file", "helper_file") if src.get(k))
            assert rec["name"] == src["name"]
            assert rec["fileCount"] == expected

    def test_all_files_present(self, file_handlers):
        alpha = file_handlers.list_blocks()["blocks"][0]
        assert alpha["hasCSS"] is alpha["hasJS"] is alpha["hasHelper"] is True
        assert alpha["fileCount"] == 3
        assert (alpha["jsFile"], alpha["cssFile"], alpha["helperFile"]) == ("a.js", "a.css", "a-h.js")

    def test_name_and_description_only(self, file_handlers):
        beta = file_handlers.list_blocks()["blocks"][1]
        assert beta["hasCSS"] is beta["hasJS"] is beta["hasHelper"] is False
        assert beta["fileCount"] == 0
        assert beta["jsFile"] is None and beta["cssFile"] is None and beta["helperFile"] is None

    def test_mixed_flags(self, file_handlers):
        delta = file_handlers.list_blocks()["blocks"][3]
        assert (delta["hasJS"], delta["hasCSS"], delta["hasHelper"]) == (True, False, True)
        assert delta["fileCount"] == 2

    def test_file_envelope(self, file_handlers, tmp_path):
        payload = file_handlers.list_blocks()
        assert payload["mode"] == "metadata-only"
        assert payload["source"] == "blocks-file"
        assert payload["path"] == str((tmp_path / "blocks.json").resolve())
        assert payload["message"].startswith("Loaded blocks metadata from ")

    def test_embedded_envelope(self, embedded_handlers):
        payload = embedded_handlers.list_blocks()
        assert payload["total"] == 16
        assert payload["source"] == "embedded-data"
        assert payload["message"] == "Using embedded blocks metadata for analysis"
        assert "path" not in payload
        form = [b for b in payload["blocks"] if b["name"] == "Form"][0]
        assert form["fileCount"] == 3
        assert form["helperFile"] == "blocks/form/form-fields.js"

    def test_unavailable_envelope(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        handlers = BlockCatalogHandlers(None)
        payload = handlers.list_blocks()
        assert payload["error"] == "blocks.json not found"
        assert "blocks.json" in payload["suggestion"]
        assert payload["cwd"] == os.getcwd()
        assert Path(payload["cwd"]).resolve() == tmp_path.resolve()
        assert "blocks" not in payload

    def test_internal_failure_is_error_payload(self):
        handlers = BlockCatalogHandlers(_BrokenCatalog())  # type: ignore[arg-type]
        payload = handlers.list_blocks()
        assert payload == {"error": "Failed to list blocks", "details": "disk on fire"}
        # still serving afterwards
        assert handlers.list_blocks()["error"] == "Failed to list blocks"

    def test_text_is_indented_json(self, embedded_handlers):
        text = embedded_handlers.list_blocks_text()
        assert text.startswith("{\n  ")
        assert json.loads(text) == embedded_handlers.list_blocks()


class TestDescribeCatalog:
    """Test cases for describe_catalog"""

    def test_assistant_message_shape(self, embedded_handlers):
        msg = embedded_handlers.describe_catalog()
        assert msg["role"] == "assistant"
        assert msg["content"]["type"] == "text"

    def test_round_trip_by_name(self, file_handlers):
        text = file_handlers.describe_text()
        records = json.loads(text)
        assert [b.name for b in parse_blocks(records)] == [s["name"] for s in SAMPLE]
        assert records == SAMPLE

    def test_embedded_is_deterministic(self):
        first = BlockCatalogHandlers(EmbeddedCatalogProvider().load())
        second = BlockCatalogHandlers(EmbeddedCatalogProvider().load())
        assert first.describe_text() == first.describe_text() == second.describe_text()
        assert first.list_blocks_text() == second.list_blocks_text()

    def test_unavailable_notice(self):
        text = BlockCatalogHandlers(None).describe_text()
        assert text == "blocks.json not found. No blocks metadata available."

    def test_unavailable_notice_uses_filename(self):
        text = BlockCatalogHandlers(None, filename="catalog.json").describe_text()
        assert text.startswith("catalog.json not found")

    def test_internal_failure_notice(self):
        text = BlockCatalogHandlers(_BrokenCatalog()).describe_text()  # type: ignore[arg-type]
        assert text == "Error loading blocks metadata: disk on fire"


class TestHandlerInfo:
    def test_info_available(self, embedded_handlers):
        info = embedded_handlers.info()
        assert info["available"] is True
        assert info["total"] == 16

    def test_info_unavailable(self):
        assert BlockCatalogHandlers(None).info()["available"] is False

    def test_catalog_is_immutable_value(self):
        cat = Catalog(blocks=parse_blocks(SAMPLE), source=SOURCE_FILE)
        with pytest.raises(Exception):
            cat.source = "other"  # type: ignore[misc]
