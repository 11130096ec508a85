from __future__ import annotations

"""
Block catalog service: load the catalog once, then serve it.

Examples:
  # MCP over stdio (what MCP clients launch)
  python -m block_catalog.service

  # Force the embedded data, debug logging
  python -m block_catalog.service --mode embedded --log-level DEBUG

  # Look for blocks.json starting at a site checkout, serve over HTTP
  python -m block_catalog.service --search-root ~/sites/my-aem-site --http --port 8000
"""

import argparse
import asyncio
from typing import Any, Dict, List, Optional

import uvicorn

from common.logging_setup import get_logger, setup_logging
from block_catalog.catalog import MODES, SOURCE_EMBEDDED, load_catalog
from block_catalog.config import DEFAULT_CONFIG_PATH, load_config
from block_catalog.handlers import BlockCatalogHandlers
from block_catalog.http_api import create_app
from block_catalog.server import BlockCatalogMCPServer

logger = get_logger("block_catalog")


def build_handlers(cfg: Dict[str, Any]) -> BlockCatalogHandlers:
    """Load the catalog per the `catalog` config section and wrap it in handlers."""
    c = cfg["catalog"]
    catalog = load_catalog(
        mode=c["mode"],
        search_root=c.get("search_root"),
        filename=c["filename"],
        max_depth=int(c["max_depth"]),
    )
    if catalog is None:
        logger.warning("No blocks metadata loaded; queries will report %s as missing", c["filename"])
    elif catalog.source == SOURCE_EMBEDDED:
        logger.info("Loaded metadata for %d blocks from embedded data", len(catalog))
    else:
        logger.info("Loaded metadata for %d blocks from %s", len(catalog), catalog.path)
    if catalog is not None:
        logger.debug("Blocks: %s", ", ".join(catalog.names))
    return BlockCatalogHandlers(catalog, filename=c["filename"])


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="AEM Block Collection metadata server")
    ap.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="YAML parameters file")
    ap.add_argument("--mode", choices=MODES, help="Catalog source (overrides config)")
    ap.add_argument("--search-root", help="Directory where the blocks.json search starts")
    ap.add_argument("--http", action="store_true", help="Serve the HTTP API instead of MCP stdio")
    ap.add_argument("--host", help="HTTP bind host")
    ap.add_argument("--port", type=int, help="HTTP port")
    ap.add_argument("--log-level", help="DEBUG/INFO/WARNING/ERROR")
    return ap.parse_args(argv)


def apply_overrides(cfg: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    if args.mode:
        cfg["catalog"]["mode"] = args.mode
    if args.search_root:
        cfg["catalog"]["search_root"] = args.search_root
    if args.host:
        cfg["http"]["host"] = args.host
    if args.port is not None:
        cfg["http"]["port"] = args.port
    if args.log_level:
        cfg["logging"]["level"] = args.log_level
    return cfg


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    cfg = apply_overrides(load_config(args.config), args)
    setup_logging(cfg["logging"].get("level"), force=True)

    handlers = build_handlers(cfg)
    srv_cfg = cfg["server"]

    if args.http:
        app = create_app(handlers, version=str(srv_cfg["version"]))
        logger.info("AEM Block Collection HTTP API on %s:%s", cfg["http"]["host"], cfg["http"]["port"])
        uvicorn.run(app, host=cfg["http"]["host"], port=int(cfg["http"]["port"]), log_config=None)
        return

    server = BlockCatalogMCPServer(handlers, name=str(srv_cfg["name"]), version=str(srv_cfg["version"]))
    logger.info("AEM Block Collection MCP Server started")
    asyncio.run(server.run())


if __name__ == "__main__":
    main()
