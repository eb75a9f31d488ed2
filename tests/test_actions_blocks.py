import pytest

from nano_rpc.actions import blocks
from nano_rpc.errors import FieldTypeError
from nano_rpc.metrics import default_metrics


def test_get_block(rpc):
    client, http = rpc({"contents": {"type": "open", "account": "xrb_1"}})
    assert blocks.get_block("H", client=client) == {"type": "open", "account": "xrb_1"}
    assert http.calls[0]["json"] == {"action": "block", "hash": "H"}


def test_get_blocks(rpc):
    body = {"blocks": {"H1": {"type": "send"}, "H2": {"type": "receive"}}}
    client, _ = rpc(body)
    assert blocks.get_blocks(["H1", "H2"], client=client) == body["blocks"]


def test_block_count(rpc):
    client, _ = rpc({"count": "1000", "unchecked": "10"})
    assert blocks.block_count(client=client) == {"count": "1000", "unchecked": "10"}


def test_create_send_block_payload(rpc):
    client, http = rpc({"hash": "H", "block": "{...}"})
    blocks.create_send_block("W", "xrb_1", "xrb_2", "100", "10", "P", client=client)
    assert http.calls[0]["json"] == {
        "action": "block_create",
        "type": "send",
        "wallet": "W",
        "account": "xrb_1",
        "destination": "xrb_2",
        "balance": "100",
        "amount": "10",
        "previous": "P",
    }


def test_create_open_block_with_work(rpc):
    client, http = rpc({"hash": "H", "block": "{...}"})
    blocks.create_open_block("K", "xrb_1", "xrb_rep", "S", work="ff", client=client)
    sent = http.calls[0]["json"]
    assert sent["type"] == "open"
    assert sent["work"] == "ff"


def test_process_block(rpc):
    client, http = rpc({"hash": "H"})
    assert blocks.process_block({"type": "send"}, client=client) == "H"
    assert http.calls[0]["json"]["block"] == {"type": "send"}


def test_pending_exists(rpc):
    client, _ = rpc({"exists": "1"})
    assert blocks.pending_exists("H", client=client) is True


def test_cancel_work_ignores_body(rpc):
    client, http = rpc({})
    assert blocks.cancel_work("H", client=client) is None
    assert http.calls[0]["json"] == {"action": "work_cancel", "hash": "H"}
    assert default_metrics.snapshot()["action_success"] == {"work_cancel": 1}


def test_validate_work(rpc):
    client, _ = rpc({"valid": "0"})
    assert blocks.validate_work("w", "H", client=client) is False


def test_chain_and_successors(rpc):
    client, _ = rpc({"blocks": ["H1", "H0"]}, {"blocks": ""})
    assert blocks.chain("H1", 2, client=client) == ["H1", "H0"]
    assert blocks.successors("H1", 2, client=client) == []


def test_chain_rejects_scalar(rpc):
    client, _ = rpc({"blocks": "H1"})
    with pytest.raises(FieldTypeError):
        blocks.chain("H1", 1, client=client)


def test_history(rpc):
    body = {"history": [{"hash": "H1", "type": "send", "amount": "1"}]}
    client, _ = rpc(body)
    assert blocks.history("H1", 1, client=client) == body["history"]
