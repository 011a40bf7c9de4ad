"""MCP server for codeflow-mcp."""

import asyncio
import json
import logging
import sys

from mcp.server import Server
from mcp.types import Tool, TextContent

from .config import Settings, Session
from .tools.set_repository import set_repository, get_repository
from .tools.list_files import list_files
from .tools.get_file import get_file
from .tools.get_file_tree import get_file_tree, DEFAULT_IGNORE
from .tools.get_file_outline import get_file_outline
from .tools.resolve_symbol import resolve_symbol
from .tools.canvas import open_file, navigate_symbol, close_panel, recenter_panel, get_canvas

logger = logging.getLogger(__name__)


# Create server
server = Server("codeflow-mcp")

session = Session.from_settings(Settings.from_env())


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="set_repository",
            description="Select a local directory to explore. Validates the path and resets open panels.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Path to local folder (absolute or relative, supports ~ for home directory)"
                    }
                },
                "required": ["path"]
            }
        ),
        Tool(
            name="get_repository",
            description="Describe the directory currently being explored.",
            inputSchema={
                "type": "object",
                "properties": {}
            }
        ),
        Tool(
            name="list_files",
            description="List code and text files in the current directory, skipping node_modules, .git, dotfiles, dist and build.",
            inputSchema={
                "type": "object",
                "properties": {}
            }
        ),
        Tool(
            name="get_file",
            description="Get the content, size and modification time of a file in the current directory.",
            inputSchema={
                "type": "object",
                "properties": {
                    "file_path": {
                        "type": "string",
                        "description": "Path to the file within the directory (e.g., 'src/App.jsx')"
                    }
                },
                "required": ["file_path"]
            }
        ),
        Tool(
            name="get_file_tree",
            description="Get the nested directory tree with file sizes, honoring .gitignore and extra ignore rules.",
            inputSchema={
                "type": "object",
                "properties": {
                    "ignore": {
                        "type": "string",
                        "description": "Semicolon-separated gitignore-style rules",
                        "default": DEFAULT_IGNORE
                    },
                    "path_prefix": {
                        "type": "string",
                        "description": "Optional subdirectory to return (e.g., 'src/utils')",
                        "default": ""
                    }
                }
            }
        ),
        Tool(
            name="get_file_outline",
            description="Get declared symbols (with line and column) and import bindings of a file.",
            inputSchema={
                "type": "object",
                "properties": {
                    "file_path": {
                        "type": "string",
                        "description": "Path to the file within the directory"
                    }
                },
                "required": ["file_path"]
            }
        ),
        Tool(
            name="resolve_symbol",
            description="Find where a symbol used in a file is defined: locally, or in the file it is imported from.",
            inputSchema={
                "type": "object",
                "properties": {
                    "file_path": {
                        "type": "string",
                        "description": "File the symbol appears in"
                    },
                    "symbol": {
                        "type": "string",
                        "description": "Identifier to resolve"
                    }
                },
                "required": ["file_path", "symbol"]
            }
        ),
        Tool(
            name="open_file",
            description="Open a file as a root panel in the code canvas.",
            inputSchema={
                "type": "object",
                "properties": {
                    "file_path": {
                        "type": "string",
                        "description": "Path to the file within the directory"
                    }
                },
                "required": ["file_path"]
            }
        ),
        Tool(
            name="navigate_symbol",
            description="Follow a symbol clicked in a panel. Local definitions recenter the panel; imported ones open a linked child panel.",
            inputSchema={
                "type": "object",
                "properties": {
                    "panel_id": {
                        "type": "string",
                        "description": "Panel the symbol was clicked in"
                    },
                    "symbol": {
                        "type": "string",
                        "description": "Identifier to follow"
                    }
                },
                "required": ["panel_id", "symbol"]
            }
        ),
        Tool(
            name="close_panel",
            description="Close a panel and every panel opened from it.",
            inputSchema={
                "type": "object",
                "properties": {
                    "panel_id": {
                        "type": "string",
                        "description": "Panel to close"
                    }
                },
                "required": ["panel_id"]
            }
        ),
        Tool(
            name="recenter_panel",
            description="Scroll a panel to a line and column.",
            inputSchema={
                "type": "object",
                "properties": {
                    "panel_id": {
                        "type": "string",
                        "description": "Panel to recenter"
                    },
                    "line": {
                        "type": "integer",
                        "description": "Line number (1-indexed)"
                    },
                    "column": {
                        "type": "integer",
                        "description": "Column (0-indexed)",
                        "default": 0
                    }
                },
                "required": ["panel_id", "line"]
            }
        ),
        Tool(
            name="get_canvas",
            description="List open panels and the symbol links between them.",
            inputSchema={
                "type": "object",
                "properties": {}
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "set_repository":
            result = set_repository(path=arguments["path"], session=session)
        elif name == "get_repository":
            result = get_repository(session)
        elif name == "list_files":
            result = list_files(root=session.root)
        elif name == "get_file":
            result = get_file(root=session.root, file_path=arguments["file_path"])
        elif name == "get_file_tree":
            result = get_file_tree(
                root=session.root,
                ignore=arguments.get("ignore", DEFAULT_IGNORE),
                path_prefix=arguments.get("path_prefix", "")
            )
        elif name == "get_file_outline":
            result = get_file_outline(root=session.root, file_path=arguments["file_path"])
        elif name == "resolve_symbol":
            result = await resolve_symbol(
                root=session.root,
                file_path=arguments["file_path"],
                symbol=arguments["symbol"],
                fetch=session.fetcher()
            )
        elif name == "open_file":
            result = open_file(session, file_path=arguments["file_path"])
        elif name == "navigate_symbol":
            result = await navigate_symbol(
                session,
                panel_id=str(arguments["panel_id"]),
                symbol=arguments["symbol"]
            )
        elif name == "close_panel":
            result = close_panel(session, panel_id=str(arguments["panel_id"]))
        elif name == "recenter_panel":
            result = recenter_panel(
                session,
                panel_id=str(arguments["panel_id"]),
                line=arguments["line"],
                column=arguments.get("column", 0)
            )
        elif name == "get_canvas":
            result = get_canvas(session)
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        logger.exception("Tool %s failed", name)
        return [TextContent(type="text", text=json.dumps({"error": str(e)}, indent=2))]


async def run_server():
    """Run the MCP server."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Main entry point."""
    settings = Settings.from_env()
    # stdout carries the protocol
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
