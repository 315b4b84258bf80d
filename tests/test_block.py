import io

import pytest

from minichain.block import Block
from minichain.transaction import Transaction


def _round_trip(block):
    buf = io.BytesIO()
    block.write_to(buf)
    buf.seek(0)
    restored = Block.read_from(buf)
    assert buf.read() == b""
    return restored


def test_defaults():
    block = Block()
    assert (block.index, block.transactions, block.previous_hash, block.hash, block.timestamp) == (
        0,
        [],
        "",
        "",
        0,
    )


def test_str_lists_header_and_transactions():
    block = Block(1, [Transaction("Alice", "Bob", 50.0)], "0")
    assert str(block) == (
        "Block Index: 1\n"
        "Previous Hash: 0\n"
        "Hash: \n"
        "Sender: Alice, Receiver: Bob, Amount: 50\n"
    )


def test_empty_block_round_trip():
    block = Block(0, [], "0")
    assert _round_trip(block) == block


def test_full_block_round_trip():
    block = Block(
        7,
        [Transaction("Alice", "Bob", 50.0), Transaction("Bob", "Charlie", 30.0)],
        "prev",
        "current",
        1_700_000_000,
    )
    assert _round_trip(block) == block


def test_negative_values_round_trip():
    block = Block(-3, [], "p", "h", -42)
    restored = _round_trip(block)
    assert restored.index == -3
    assert restored.timestamp == -42


def test_mine_leaves_hash_untouched():
    block = Block(1, [Transaction("a", "b", 1.0)], "x")
    block.mine(2)
    assert block.hash == ""
    assert block.previous_hash == "x"


def test_mine_rejects_negative_difficulty():
    with pytest.raises(ValueError):
        Block().mine(-1)


def test_truncated_block_raises():
    buf = io.BytesIO()
    Block(1, [Transaction("a", "b", 1.0)], "prev", "hash", 5).write_to(buf)
    with pytest.raises(EOFError):
        Block.read_from(io.BytesIO(buf.getvalue()[:-1]))


def test_wire_layout_of_empty_block():
    buf = io.BytesIO()
    Block(0, [], "0").write_to(buf)
    data = buf.getvalue()
    assert data[:4] == b"\x00\x00\x00\x00"
    assert data[4:12] == b"\x00" * 8
    assert data[12:20] == b"\x00" * 8
    assert data[20:28] == b"\x01" + b"\x00" * 7
    assert data[28:29] == b"0"
    assert data[29:] == b"\x00" * 8