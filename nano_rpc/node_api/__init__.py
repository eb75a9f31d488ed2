"""HTTP transport and response decoders for the Nano node RPC."""

from nano_rpc.errors import (
    FieldTypeError,
    MissingKeyError,
    NanoRpcError,
    NodeError,
    ParseError,
    ShapeError,
    TransportError,
    UnknownUnitError,
)

from .client import (
    ListField,
    ListShape,
    NanoRpcClient,
    decode_string_list,
    default_client,
)

__all__ = [
    "NanoRpcClient",
    "NanoRpcError",
    "TransportError",
    "ShapeError",
    "MissingKeyError",
    "FieldTypeError",
    "ParseError",
    "UnknownUnitError",
    "NodeError",
    "ListField",
    "ListShape",
    "decode_string_list",
    "default_client",
]
