from __future__ import annotations

"""
MCP server over stdio.

Exposes:
  - prompt `aem-blocks-metadata`: the raw catalog as formatted JSON
  - tool `list_blocks`: normalized listing with hasCSS/hasJS/hasHelper/fileCount
"""

import logging
from typing import Dict, List, Optional, Sequence

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import GetPromptResult, Prompt, PromptMessage, TextContent, Tool

from block_catalog.handlers import BlockCatalogHandlers

logger = logging.getLogger(__name__)

PROMPT_NAME = "aem-blocks-metadata"
TOOL_NAME = "list_blocks"


class BlockCatalogMCPServer:
    """MCP server answering catalog queries from an injected BlockCatalogHandlers."""

    def __init__(self, handlers: BlockCatalogHandlers, name: str = "aem-block-collection", version: str = "1.0.0"):
        self.handlers = handlers
        self.server = Server(name, version=version)
        self._register_prompt_handlers()
        self._register_tool_handlers()

    # -------- prompts --------

    async def list_prompts(self) -> List[Prompt]:
        return [
            Prompt(
                name=PROMPT_NAME,
                title="AEM Blocks Metadata",
                description="Access to the complete blocks.json metadata for AEM blocks",
                arguments=[],
            )
        ]

    async def get_prompt(self, name: str, arguments: Optional[Dict[str, str]] = None) -> GetPromptResult:
        if name != PROMPT_NAME:
            raise ValueError(f"Unknown prompt: {name}")
        msg = self.handlers.describe_catalog()
        return GetPromptResult(
            description="AEM Blocks Metadata",
            messages=[
                PromptMessage(
                    role=msg["role"],
                    content=TextContent(type="text", text=msg["content"]["text"]),
                )
            ],
        )

    # -------- tools --------

    async def list_tools(self) -> List[Tool]:
        return [
            Tool(
                name=TOOL_NAME,
                title="List AEM Blocks",
                description="List all available AEM blocks with metadata from blocks.json",
                inputSchema={"type": "object", "properties": {}},
            )
        ]

    async def call_tool(self, name: str, arguments: Optional[Dict] = None) -> Sequence[TextContent]:
        if name != TOOL_NAME:
            raise ValueError(f"Unknown tool: {name}")
        return [TextContent(type="text", text=self.handlers.list_blocks_text())]

    # -------- wiring --------

    def _register_prompt_handlers(self) -> None:
        self.server.list_prompts()(self.list_prompts)
        self.server.get_prompt()(self.get_prompt)

    def _register_tool_handlers(self) -> None:
        self.server.list_tools()(self.list_tools)
        self.server.call_tool()(self.call_tool)

    async def run(self) -> None:
        """Serve MCP requests on stdin/stdout until the client disconnects."""
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )
