"""
OSA script transport for MoneyMoney.

Calls are JavaScript for Automation (JXA) snippets run through ``osascript``.
The call envelope is passed as a JSON command line argument and the script
prints its result as JSON.
"""

import json
import logging
import shutil
import subprocess
import sys
from typing import Any, Dict, Optional, Protocol

from moneymoney_mcp.core.decoder import decode_plist
from moneymoney_mcp.core.exceptions import ScriptExecutionError

logger = logging.getLogger(__name__)

CALL_SCRIPT = """
function run(argv) {
    var params = JSON.parse(argv[0]);
    var result = Application('MoneyMoney')[params.method](params.args || []);
    return JSON.stringify(result === undefined ? null : result);
}
"""

VOID_CALL_SCRIPT = """
function run(argv) {
    var params = JSON.parse(argv[0]);
    Application('MoneyMoney')[params.method](params.args || {});
    return JSON.stringify(true);
}
"""


class Transport(Protocol):
    """Anything that can deliver a call envelope to MoneyMoney."""

    def execute(self, envelope: Dict[str, Any]) -> Optional[str]:
        """Run a call and return MoneyMoney's raw answer, if any."""
        ...

    def execute_void(self, envelope: Dict[str, Any]) -> None:
        """Run a call that returns no data; raise unless it is acknowledged."""
        ...


class OsaScriptTransport:
    """
    Transport that drives MoneyMoney through ``osascript``.

    Each call starts one osascript process and blocks until it exits.
    """

    def __init__(self, osascript_path: str = "osascript"):
        """
        Initialize the transport.

        Args:
            osascript_path: Name or path of the osascript binary
        """
        self.osascript_path = osascript_path

    def is_available(self) -> bool:
        """Check that we are on macOS and osascript can be found."""
        if sys.platform != "darwin":
            return False
        return shutil.which(self.osascript_path) is not None

    def execute(self, envelope: Dict[str, Any]) -> Optional[str]:
        """
        Run a MoneyMoney method and return its raw answer.

        Args:
            envelope: Call envelope from build_envelope()

        Returns:
            Raw response text (a plist for export methods), or None when
            MoneyMoney returned nothing

        Raises:
            ScriptExecutionError: If the script fails or returns non-text data
        """
        result = self._run(CALL_SCRIPT, envelope)
        if result is not None and not isinstance(result, str):
            raise ScriptExecutionError(
                f"Unexpected {type(result).__name__} result from {envelope['method']}"
            )
        return result

    def execute_void(self, envelope: Dict[str, Any]) -> None:
        """
        Run a MoneyMoney method that modifies data and returns nothing.

        Raises:
            ScriptExecutionError: If the script fails or the call is not acknowledged
        """
        result = self._run(VOID_CALL_SCRIPT, envelope)
        if not result:
            raise ScriptExecutionError(
                f"MoneyMoney did not acknowledge {envelope['method']}"
            )

    def _run(self, script: str, envelope: Dict[str, Any]) -> Any:
        method = envelope["method"]
        logger.debug(f"Calling MoneyMoney method {method}")

        try:
            completed = subprocess.run(
                [
                    self.osascript_path,
                    "-l",
                    "JavaScript",
                    "-e",
                    script,
                    json.dumps(envelope),
                ],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise ScriptExecutionError(
                f"Could not run {self.osascript_path}: {e}"
            ) from e

        if completed.returncode != 0:
            stderr = completed.stderr.strip()
            logger.warning(f"{method} failed ({completed.returncode}): {stderr}")
            raise ScriptExecutionError(
                f"OSA script execution failed: {stderr}",
                stderr=stderr,
                returncode=completed.returncode,
            )

        output = completed.stdout.strip()
        if not output:
            return None

        try:
            return json.loads(output)
        except json.JSONDecodeError as e:
            raise ScriptExecutionError(
                f"Unreadable result from {method}: {output[:100]!r}"
            ) from e


def execute_plist(transport: Transport, envelope: Dict[str, Any]) -> Any:
    """
    Run a MoneyMoney method and parse its property list answer.

    Args:
        transport: Transport to send the call through
        envelope: Call envelope from build_envelope()

    Returns:
        Parsed plist value (dicts, lists, strings, numbers, datetimes, bytes)

    Raises:
        ScriptExecutionError: If the call fails
        EmptyResponseError: If MoneyMoney returned nothing
        DecodeError: If the answer is not a valid plist
    """
    return decode_plist(transport.execute(envelope))
