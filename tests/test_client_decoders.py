import sys

import pytest

from nano_rpc.config import NanoConfig
from nano_rpc.metrics import default_metrics
from nano_rpc.node_api import (
    FieldTypeError,
    MissingKeyError,
    NodeError,
    ParseError,
    ShapeError,
)


def test_fetch_map_flat(rpc):
    client, http = rpc({"rpc_version": "1", "store_version": "10", "node_vendor": "Nano 10.0"})
    assert client.fetch_map("version") == {
        "rpc_version": "1",
        "store_version": "10",
        "node_vendor": "Nano 10.0",
    }
    assert http.calls[0]["json"] == {"action": "version"}


def test_fetch_map_nested_under_key(rpc):
    client, _ = rpc({"peers": {"[::ffff:1.2.3.4]:7075": "5"}})
    assert client.fetch_map("peers", key="peers") == {"[::ffff:1.2.3.4]:7075": "5"}


def test_fetch_map_missing_key(rpc):
    client, _ = rpc({"other": {}})
    with pytest.raises(MissingKeyError) as excinfo:
        client.fetch_map("peers", key="peers")
    assert excinfo.value.action == "peers"


def test_fetch_map_rejects_wrong_nesting(rpc):
    client, _ = rpc(["not", "an", "object"])
    with pytest.raises(ShapeError):
        client.fetch_map("version")

    client, _ = rpc({"peers": "nope"})
    with pytest.raises(ShapeError):
        client.fetch_map("peers", key="peers")


def test_fetch_map_rejects_non_string_leaf(rpc):
    client, _ = rpc({"count": 5})
    with pytest.raises(ShapeError):
        client.fetch_map("block_count")


def test_invalid_json_is_shape_error(rpc):
    client, _ = rpc(b"<html>oops</html>")
    with pytest.raises(ShapeError):
        client.fetch_map("version")


def test_fetch_map_interface_keeps_json_leaves(rpc):
    body = {"blocks": {"ABC": {"amount": "1", "contents": {"type": "send"}}, "DEF": ["x"]}}
    client, _ = rpc(body)
    result = client.fetch_map_interface("blocks_info", key="blocks")
    assert result["ABC"]["contents"] == {"type": "send"}
    assert result["DEF"] == ["x"]


def test_fetch_map_of_maps(rpc):
    body = {"balances": {"xrb_1": {"balance": "10", "pending": "0"}}}
    client, _ = rpc(body)
    assert client.fetch_map_of_maps("accounts_balances", key="balances") == {
        "xrb_1": {"balance": "10", "pending": "0"}
    }


def test_fetch_map_of_maps_rejects_flat_entry(rpc):
    client, _ = rpc({"balances": {"xrb_1": "10"}})
    with pytest.raises(ShapeError):
        client.fetch_map_of_maps("accounts_balances", key="balances")


def test_fetch_string(rpc):
    client, _ = rpc({"account": "xrb_abc"})
    assert client.fetch_string("account_get", {"key": "K"}, key="account") == "xrb_abc"


def test_fetch_string_missing(rpc):
    client, _ = rpc({})
    with pytest.raises(MissingKeyError):
        client.fetch_string("account_get", {"key": "K"}, key="account")


def test_fetch_int(rpc):
    client, _ = rpc({"count": "42"})
    assert client.fetch_int("frontier_count", key="count") == 42


@pytest.mark.parametrize("raw", ["x", "", "4.2", "1_000", " 7", "7\n", "\u0667"])
def test_fetch_int_parse_error(rpc, raw):
    client, _ = rpc({"count": raw})
    with pytest.raises(ParseError):
        client.fetch_int("frontier_count", key="count")


def test_fetch_int_accepts_sign(rpc):
    client, _ = rpc({"count": "-7"}, {"count": "+12"})
    assert client.fetch_int("delegators_count", key="count") == -7
    assert client.fetch_int("delegators_count", key="count") == 12


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"), reason="interpreter has no int digit limit"
)
def test_fetch_int_too_many_digits(rpc):
    client, _ = rpc({"count": "9" * 5000})
    with pytest.raises(ParseError):
        client.fetch_int("frontier_count", key="count")
    assert default_metrics.snapshot()["action_error"] == {"frontier_count": 1}


def test_is_success_presence_convention(rpc):
    client, _ = rpc({"success": ""})
    assert client.is_success("stop") is True

    client, _ = rpc({})
    assert client.is_success("stop") is False


def test_is_success_presence_ignores_value(rpc):
    client, _ = rpc({"success": "0"})
    assert client.is_success("bootstrap_any") is True


def test_is_success_flag_convention(rpc):
    client, _ = rpc({"moved": "1"})
    assert client.is_success("account_move", key="moved") is True

    client, _ = rpc({"moved": "0"})
    assert client.is_success("account_move", key="moved") is False

    client, _ = rpc({})
    assert client.is_success("account_move", key="moved") is False


def test_is_success_flag_does_not_accept_success_field(rpc):
    client, _ = rpc({"success": ""})
    assert client.is_success("account_move", key="moved") is False


def test_fetch_list_array(rpc):
    client, _ = rpc({"accounts": ["a", "b"]})
    assert client.fetch_list("account_list", key="accounts") == ["a", "b"]


def test_fetch_list_empty_string_is_empty_list(rpc):
    client, _ = rpc({"blocks": ""})
    assert client.fetch_list("chain", key="blocks") == []


def test_fetch_list_scalar_string_is_type_error(rpc):
    client, _ = rpc({"blocks": "nonempty"})
    with pytest.raises(FieldTypeError):
        client.fetch_list("chain", key="blocks")


def test_fetch_list_missing_key(rpc):
    client, _ = rpc({})
    with pytest.raises(MissingKeyError):
        client.fetch_list("chain", key="blocks")


def test_fetch_interface(rpc):
    client, _ = rpc({"blocks": {"H1": "100"}})
    assert client.fetch_interface("pending", key="blocks") == {"H1": "100"}


def test_fetch_records_top_level(rpc):
    body = [{"hash": "H1", "type": "send", "amount": "5"}]
    client, _ = rpc(body)
    assert client.fetch_records("account_history") == body


def test_fetch_records_nested(rpc):
    body = {"history": [{"hash": "H1", "type": "receive"}]}
    client, _ = rpc(body)
    assert client.fetch_records("history", key="history") == body["history"]


def test_fetch_records_rejects_object(rpc):
    client, _ = rpc({"hash": "H1"})
    with pytest.raises(ShapeError):
        client.fetch_records("account_history")


def test_node_error_raised_by_default(rpc):
    client, _ = rpc({"error": "Bad account number"})
    with pytest.raises(NodeError) as excinfo:
        client.fetch_string("account_key", {"account": "bad"}, key="key")
    assert str(excinfo.value) == "Bad account number"
    assert excinfo.value.action == "account_key"


def test_node_error_can_be_treated_as_missing_field(rpc):
    cfg = NanoConfig(base_url="http://node.test:7076", raise_node_errors=False)
    client, _ = rpc({"error": "Bad account number"}, config=cfg)
    with pytest.raises(MissingKeyError):
        client.fetch_string("account_key", {"account": "bad"}, key="key")

    client, _ = rpc({"error": "Wallet locked"}, config=cfg)
    assert client.is_success("stop") is False
