"""
Exceptions raised when talking to MoneyMoney.

None of these derive from ValueError: pydantic only converts ValueError and
AssertionError into ValidationError, so domain errors raised inside model
validators reach the caller with their own type.
"""

from typing import Optional, Sequence


class MoneyMoneyError(Exception):
    """Base exception for MoneyMoney errors."""
    pass


class ScriptExecutionError(MoneyMoneyError):
    """Raised when the OSA script could not be run or MoneyMoney rejected the call."""

    def __init__(
        self,
        message: str,
        stderr: Optional[str] = None,
        returncode: Optional[int] = None,
    ):
        super().__init__(message)
        self.stderr = stderr
        self.returncode = returncode


class DecodeError(MoneyMoneyError):
    """Raised when a response is present but cannot be decoded."""
    pass


class EmptyResponseError(MoneyMoneyError):
    """Raised when MoneyMoney returned nothing where data was expected."""

    def __init__(self, message: str = "Received empty plist response from MoneyMoney"):
        super().__init__(message)


class InvalidCurrencyError(MoneyMoneyError):
    """Raised when a currency code is not a known ISO 4217 code."""

    def __init__(self, code: str):
        super().__init__(f"Invalid currency code: {code}")
        self.code = code


class MissingParameterError(MoneyMoneyError):
    """Raised when a request is built without a value the operation requires."""

    def __init__(self, method: str, missing: Sequence[str]):
        names = ", ".join(missing)
        super().__init__(f"{method} requires: {names}")
        self.method = method
        self.missing = list(missing)
