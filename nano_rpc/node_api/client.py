"""
Thin HTTP client for the Nano node RPC.

Every request is a POST of ``{"action": ..., **params}``. Responses are loosely
typed JSON whose shape depends on the action, so the caller declares the shape
it expects by picking one of the ``fetch_*`` strategies below and the client
fails loudly when the body does not match.
"""

from __future__ import annotations

import json
import logging
import re
import time
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from threading import Lock
from typing import Any, Dict, Iterator, List, Mapping, Optional

import httpx

from nano_rpc.config import NanoConfig, default_config
from nano_rpc.errors import (
    FieldTypeError,
    MissingKeyError,
    NanoRpcError,
    NodeError,
    ParseError,
    ShapeError,
    TransportError,
)
from nano_rpc.metrics import MetricsRecorder, default_metrics

logger = logging.getLogger(__name__)

Params = Optional[Mapping[str, Any]]

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class ListShape(Enum):
    EMPTY_STRING = "empty_string"
    SCALAR_STRING = "scalar_string"
    STRING_ARRAY = "string_array"
    ANY_ARRAY = "any_array"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class ListField:
    """A decoded response field tagged with the runtime shape it arrived in."""

    shape: ListShape
    value: Any

    @classmethod
    def classify(cls, value: Any) -> "ListField":
        if isinstance(value, str):
            if value == "":
                return cls(ListShape.EMPTY_STRING, value)
            return cls(ListShape.SCALAR_STRING, value)
        if isinstance(value, list):
            if all(isinstance(item, str) for item in value):
                return cls(ListShape.STRING_ARRAY, value)
            return cls(ListShape.ANY_ARRAY, value)
        return cls(ListShape.OTHER, value)


def decode_string_list(value: Any, *, action: str = "", key: str = "") -> List[str]:
    """
    Read one response field as a list of strings.

    The node encodes "no results" as an empty string rather than an empty
    array, so ``""`` is a valid empty list. Any other scalar, or an array
    holding a non-string, raises FieldTypeError.
    """
    field = ListField.classify(value)
    if field.shape is ListShape.STRING_ARRAY:
        return list(field.value)
    if field.shape is ListShape.EMPTY_STRING:
        return []
    if field.shape is ListShape.ANY_ARRAY:
        # classify() only tags arrays holding a non-string as ANY_ARRAY.
        index, item = next(
            (index, item) for index, item in enumerate(field.value) if not isinstance(item, str)
        )
        raise FieldTypeError(
            f"Key {key} in response of {action} holds a {type(item).__name__} "
            f"at index {index} instead of a string.",
            action=action,
        )
    if field.shape is ListShape.SCALAR_STRING:
        raise FieldTypeError(
            f"Key {key} in response of {action} contains a string instead of a list.",
            action=action,
        )
    raise FieldTypeError(
        f"Key {key} in response of {action} contains an invalid type "
        f"{type(field.value).__name__}.",
        action=action,
    )


def _success_by_presence(fields: Mapping[str, str]) -> bool:
    # Existence flag: the value of "success" is irrelevant, usually "".
    return "success" in fields


def _success_by_flag(fields: Mapping[str, str], key: str) -> bool:
    # Boolean-as-string: only the exact string "1" counts.
    return fields.get(key) == "1"


class NanoRpcClient:
    """Blocking client for the Nano node RPC surface."""

    def __init__(
        self,
        config: NanoConfig | None = None,
        *,
        http_client: Optional[httpx.Client] = None,
        metrics: Optional[MetricsRecorder] = None,
    ) -> None:
        self.config = config or default_config
        self._client: Optional[httpx.Client] = http_client
        self._owns_client = http_client is None
        self._client_lock = Lock()
        self._metrics = metrics or default_metrics

    def _get_client(self) -> httpx.Client:
        with self._client_lock:
            if self._client is None:
                self._client = httpx.Client(timeout=self.config.timeout)
                self._owns_client = True
            return self._client

    def close(self) -> None:
        with self._client_lock:
            if self._client is not None and self._owns_client:
                self._client.close()
                self._client = None

    def __enter__(self) -> "NanoRpcClient":
        return self

    def __exit__(self, *_exc_info: Any) -> None:
        self.close()

    def with_endpoint(self, base_url: str) -> "NanoRpcClient":
        """Build a separate client for another node; this client is left untouched."""
        return NanoRpcClient(self.config.with_endpoint(base_url), metrics=self._metrics)

    # Transport

    def call(self, action: str, params: Params = None) -> bytes:
        """POST ``action`` with ``params`` and return the raw response body."""
        payload: Dict[str, Any] = dict(params or {})
        payload["action"] = action
        client = self._get_client()
        self._metrics.incr_request()
        start = time.monotonic()
        try:
            response = client.post(self.config.base_url, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning(
                "Nano node unreachable for action %s",
                action,
                extra={"action": action, "error": type(exc).__name__},
            )
            self._metrics.incr_transport_failure()
            self._metrics.record_action(action, success=False)
            raise TransportError("Node unreachable", action=action) from exc
        self._metrics.record_duration(action, (time.monotonic() - start) * 1000)
        if response.status_code >= 400:
            logger.debug("action=%s http_status=%s", action, response.status_code)
        return response.content

    # Decoding helpers (unrecorded building blocks)

    def _load(self, action: str, params: Params) -> Any:
        raw = self.call(action, params)
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise ShapeError(f"Response of {action} is not valid JSON.", action=action) from exc
        if self.config.raise_node_errors and isinstance(data, dict):
            message = data.get("error")
            if isinstance(message, str):
                raise NodeError(message, action=action, code=message)
        return data

    @staticmethod
    def _object(action: str, data: Any, key: str) -> Dict[str, Any]:
        if not isinstance(data, dict):
            raise ShapeError(f"Response of {action} is not a JSON object.", action=action)
        if not key:
            return data
        if key not in data:
            raise MissingKeyError(f"Response of {action} doesn't contain key {key}.", action=action)
        inner = data[key]
        if not isinstance(inner, dict):
            raise ShapeError(
                f"Key {key} in response of {action} is not a JSON object.", action=action
            )
        return inner

    @staticmethod
    def _string_map(action: str, data: Mapping[str, Any]) -> Dict[str, str]:
        for name, value in data.items():
            if not isinstance(value, str):
                raise ShapeError(
                    f"Key {name} in response of {action} holds a {type(value).__name__}, "
                    "expected a string.",
                    action=action,
                )
        return dict(data)

    @staticmethod
    def _field(action: str, data: Mapping[str, Any], key: str) -> Any:
        if key not in data:
            raise MissingKeyError(f"Response of {action} doesn't contain key {key}.", action=action)
        return data[key]

    def _flat_map(self, action: str, params: Params, key: str = "") -> Dict[str, str]:
        return self._string_map(action, self._object(action, self._load(action, params), key))

    @contextmanager
    def _recording(self, action: str) -> Iterator[None]:
        try:
            yield
        except TransportError:
            # Already counted by call().
            raise
        except NanoRpcError as exc:
            logger.debug(
                "action=%s outcome=error error=%s",
                action,
                exc,
                extra={"action": action, "error": type(exc).__name__},
            )
            self._metrics.record_action(action, success=False)
            raise
        self._metrics.record_action(action, success=True)

    # Decode strategies

    def execute(self, action: str, params: Params = None) -> None:
        """Send an action whose reply carries nothing, still checking for node errors."""
        with self._recording(action):
            self._load(action, params)

    def fetch_map(self, action: str, params: Params = None, key: str = "") -> Dict[str, str]:
        """
        Decode the response as a flat string map.

        With an empty ``key`` the whole top-level object is the map; otherwise
        the map is the object stored under ``key``.
        """
        with self._recording(action):
            return self._flat_map(action, params, key)

    def fetch_map_interface(
        self, action: str, params: Params = None, key: str = ""
    ) -> Dict[str, Any]:
        """Like fetch_map, but leaf values are left as arbitrary JSON."""
        with self._recording(action):
            return dict(self._object(action, self._load(action, params), key))

    def fetch_map_of_maps(
        self, action: str, params: Params = None, key: str = ""
    ) -> Dict[str, Dict[str, str]]:
        """Decode a map whose values are themselves flat string maps."""
        with self._recording(action):
            outer = self._object(action, self._load(action, params), key)
            result: Dict[str, Dict[str, str]] = {}
            for name, value in outer.items():
                if not isinstance(value, dict):
                    raise ShapeError(
                        f"Entry {name} in response of {action} is not a JSON object.",
                        action=action,
                    )
                result[name] = self._string_map(action, value)
            return result

    def fetch_string(self, action: str, params: Params = None, *, key: str) -> str:
        with self._recording(action):
            return self._field(action, self._flat_map(action, params), key)

    def fetch_int(self, action: str, params: Params = None, *, key: str) -> int:
        with self._recording(action):
            raw = self._field(action, self._flat_map(action, params), key)
            if not _INT_PATTERN.fullmatch(raw):
                raise ParseError(
                    f"Key {key} in response of {action} is not an integer: {raw!r}.",
                    action=action,
                )
            try:
                return int(raw)
            except ValueError:
                # Past the interpreter's int/str digit limit.
                raise ParseError(
                    f"Key {key} in response of {action} has too many digits ({len(raw)}).",
                    action=action,
                ) from None

    def fetch_interface(self, action: str, params: Params = None, *, key: str) -> Any:
        with self._recording(action):
            data = self._object(action, self._load(action, params), "")
            return self._field(action, data, key)

    def is_success(self, action: str, params: Params = None, key: str = "") -> bool:
        """
        Report whether the node acknowledged the action.

        Actions use one of two conventions: an empty ``key`` means success is
        the presence of a ``success`` field; a non-empty ``key`` means that
        field must equal the string ``"1"``.
        """
        with self._recording(action):
            fields = self._flat_map(action, params)
            if not key:
                return _success_by_presence(fields)
            return _success_by_flag(fields, key)

    def fetch_list(self, action: str, params: Params = None, *, key: str) -> List[str]:
        with self._recording(action):
            data = self._object(action, self._load(action, params), "")
            return decode_string_list(self._field(action, data, key), action=action, key=key)

    def fetch_records(
        self, action: str, params: Params = None, key: str = ""
    ) -> List[Dict[str, str]]:
        """Decode a list of flat string maps, top-level or stored under ``key``."""
        with self._recording(action):
            data = self._load(action, params)
            if key:
                data = self._field(action, self._object(action, data, ""), key)
            if not isinstance(data, list):
                raise ShapeError(f"Response of {action} is not a JSON array.", action=action)
            records: List[Dict[str, str]] = []
            for item in data:
                if not isinstance(item, dict):
                    raise ShapeError(
                        f"Entry in response of {action} is not a JSON object.", action=action
                    )
                records.append(self._string_map(action, item))
            return records


default_client = NanoRpcClient()
