"""
MCP server for MoneyMoney.

Exposes MoneyMoney accounts, categories, transactions and portfolios
through the Model Context Protocol.
"""

import json
import logging
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from moneymoney_mcp.core.client import MoneyMoneyClient
from moneymoney_mcp.core.transport import Transport
from moneymoney_mcp.core.exceptions import MoneyMoneyError, ScriptExecutionError
from moneymoney_mcp.tools.tools import MoneyMoneyTools, create_tool_schemas

logger = logging.getLogger(__name__)

TOOL_NAMES = (
    "get_accounts",
    "get_account_balance",
    "get_categories",
    "get_transactions",
    "get_portfolio",
    "add_transaction",
    "set_transaction",
)


class MoneyMoneyServer:
    """MCP server for MoneyMoney."""

    def __init__(self, transport: Optional[Transport] = None):
        """
        Initialize the MCP server.

        Args:
            transport: Optional transport used to reach MoneyMoney.
                      If None, uses osascript.
        """
        self.client = MoneyMoneyClient(transport)
        self.tools = MoneyMoneyTools(self.client)
        self.server = Server("moneymoney-mcp")

        # Register handlers
        self._register_handlers()

    def handle_tool_call(self, name: str, arguments: dict[str, Any]) -> str:
        """
        Run a tool and format its result as text.

        Args:
            name: Tool name
            arguments: Tool arguments

        Returns:
            JSON result, or an error message
        """
        if not self.client.is_available():
            return (
                "MoneyMoney is not available. It can only be scripted on macOS "
                "with MoneyMoney installed and running."
            )

        if name not in TOOL_NAMES:
            return f"Unknown tool: {name}"

        try:
            result = getattr(self.tools, name)(**arguments)
        except ScriptExecutionError as e:
            # MoneyMoney not running, locked, or the call was rejected
            logger.warning(f"Tool {name} failed: {e}")
            return f"Error talking to MoneyMoney: {e}"
        except (ValueError, TypeError, MoneyMoneyError) as e:
            return f"Error: {str(e)}"
        except Exception as e:
            logger.exception(f"Error executing tool {name}")
            return f"Error executing tool: {str(e)}"

        return json.dumps(result, indent=2)

    def _register_handlers(self) -> None:
        """Register MCP protocol handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            """List available tools."""
            schemas = create_tool_schemas()
            return [
                Tool(
                    name=schema["name"],
                    description=schema["description"],
                    inputSchema=schema["inputSchema"],
                )
                for schema in schemas
            ]

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
            """Handle tool calls."""
            text = self.handle_tool_call(name, arguments or {})
            return [TextContent(type="text", text=text)]

    async def run(self) -> None:  # pragma: no cover
        """Run the MCP server using stdio transport."""
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


async def run_server(transport: Optional[Transport] = None) -> None:  # pragma: no cover
    """
    Run the MoneyMoney MCP server.

    Args:
        transport: Optional transport used to reach MoneyMoney.
                  If None, uses osascript.
    """
    server = MoneyMoneyServer(transport)
    await server.run()
