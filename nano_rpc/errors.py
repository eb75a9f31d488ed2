"""Exception hierarchy shared by the transport, the decoders and the unit converter."""

from __future__ import annotations

from typing import Optional


class NanoRpcError(Exception):
    """Base exception for Nano RPC errors."""

    def __init__(
        self,
        message: str,
        *,
        action: Optional[str] = None,
        code: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.action = action
        self.code = code


class TransportError(NanoRpcError):
    """Raised when the node cannot be reached or the HTTP exchange fails."""


class ShapeError(NanoRpcError):
    """Raised when a response does not have the nesting or leaf types expected."""


class MissingKeyError(NanoRpcError):
    """Raised when an expected field is absent from a response."""


class FieldTypeError(NanoRpcError, TypeError):
    """Raised when a list field holds something that cannot be read as a list of strings."""


class ParseError(NanoRpcError, ValueError):
    """Raised when numeric or decimal text cannot be parsed."""


class UnknownUnitError(NanoRpcError, ValueError):
    """Raised when a conversion names an unregistered denomination."""


class NodeError(NanoRpcError):
    """Raised when the node answers with an ``error`` field instead of a result."""
