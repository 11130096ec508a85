"""
AEM Block Collection: metadata server

- Loads the block catalog once at startup: `blocks.json` found by an upward
  directory search, or the embedded literal (`embedded.py`)
- Serves it over MCP stdio: prompt `aem-blocks-metadata`, tool `list_blocks`
- Optional HTTP mirror (FastAPI): /health, /blocks, /metadata

Usage:
    python -m block_catalog.service                 # MCP over stdio
    python -m block_catalog.service --http --port 8000
"""
