"""MCP server that exposes Makefile generation as tools."""

import logging
import sys
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.types import TextContent, Tool

from makefile_gen.core.makefile import MakefileGenerator
from makefile_gen.exceptions import InvalidArgumentError, MakefileGenError

logger = logging.getLogger(__name__)

GENERATE_TOOL = "generate"
ADD_TARGET_TOOL = "add_target"


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


class MakefileGenServer:
    """MCP server that generates Makefiles and appends targets to them."""

    def __init__(
        self,
        default_path: Path = Path("."),
        generator: MakefileGenerator | None = None,
        allow_overwrite: bool = True,
    ):
        self.default_path = default_path
        self.generator = generator or MakefileGenerator()
        self.allow_overwrite = allow_overwrite
        self.server = Server("makefile-gen")

        # Register handlers
        @self.server.list_tools()
        async def handle_list_tools() -> list[Tool]:
            return await self._handle_list_tools()

        @self.server.call_tool()
        async def handle_call_tool(name: str, arguments: dict) -> list[TextContent]:
            return await self._handle_call_tool(name, arguments)

    async def _handle_list_tools(self) -> list[Tool]:
        """Return the generate and add_target tools."""
        path_property = {
            "type": "string",
            "description": f"Makefile or directory containing it (default: {self.default_path})",
        }
        overwrite_description = "Discard existing content instead of keeping it after the boilerplate"
        if not self.allow_overwrite:
            overwrite_description += " (disabled on this server)"

        return [
            Tool(
                name=GENERATE_TOOL,
                description="Write the standard help/test/coverage Makefile",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "path": path_property,
                        "overwrite": {
                            "type": "boolean",
                            "description": overwrite_description,
                            "default": False,
                        },
                    },
                },
            ),
            Tool(
                name=ADD_TARGET_TOOL,
                description="Append a .PHONY target to an existing Makefile",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "name": {"type": "string", "description": "Target name (no spaces)"},
                        "path": path_property,
                        "content": {
                            "type": "string",
                            "description": "Command line placed under the target",
                        },
                        "dependencies": {
                            "type": "array",
                            "items": {"type": "string"},
                            "description": "Targets this target depends on",
                        },
                    },
                    "required": ["name"],
                },
            ),
        ]

    async def _handle_call_tool(self, name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Run a generate or add_target call."""
        arguments = arguments or {}
        path = Path(arguments.get("path") or self.default_path)

        try:
            if name == GENERATE_TOOL:
                # Only a JSON true counts; strings such as "false" must not discard content
                overwrite = arguments.get("overwrite", False) is True
                if overwrite and not self.allow_overwrite:
                    raise InvalidArgumentError("overwriting an existing Makefile is disabled on this server")
                makefile_path = self.generator.generate(path, overwrite=overwrite)
                text = f"Makefile was generated successfully at {makefile_path}"
            elif name == ADD_TARGET_TOOL:
                target_name = arguments.get("name")
                if not target_name:
                    raise InvalidArgumentError("target name is required")
                makefile_path = self.generator.add_target(
                    path,
                    target_name,
                    content=arguments.get("content"),
                    dependencies=arguments.get("dependencies"),
                )
                text = f"Target {target_name} was successfully added to {makefile_path}"
            else:
                raise InvalidArgumentError(f"Unknown tool '{name}'. Available tools: {GENERATE_TOOL}, {ADD_TARGET_TOOL}")
        except MakefileGenError as e:
            # User-facing errors - return clean message
            logger.warning(f"Tool call failed: {e}")
            return [TextContent(type="text", text=f"Error: {str(e)}")]
        except Exception as e:
            # Unexpected errors - log details but return generic message
            logger.exception(f"Unexpected error in tool call: {e}")
            return [
                TextContent(type="text", text="An unexpected error occurred. Please check the server logs for details.")
            ]

        logger.info(text)
        return [TextContent(type="text", text=text)]

    async def run(self) -> None:
        """Run the MCP server with stdio transport."""
        from mcp.server.stdio import stdio_server

        logger.info(f"Serving Makefile generation for {self.default_path}")

        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )
