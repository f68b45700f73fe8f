"""
Reversi error hierarchy.

Everything raised by the engine derives from ReversiError so adapters can
catch one type and turn it into a response.
"""

from typing import Any, Dict, Optional


class ReversiError(Exception):
    """Base exception for all Reversi errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        context: Extra details for debugging
    """
    code: str = "REVERSI_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class IllegalMoveError(ReversiError):
    """A move was applied that is not in the current legal-move set.

    Raised by the engine when the target captures nothing or when the
    capture list handed in no longer matches the board (a stale move).
    """
    code: str = "ILLEGAL_MOVE"


class NoLegalMoveError(ReversiError):
    """An AI strategy was asked to choose from an empty move set."""
    code: str = "NO_LEGAL_MOVE"


class ConfigurationError(ReversiError):
    code: str = "CONFIGURATION_ERROR"
