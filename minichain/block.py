"""Blocks: ordered batches of transactions linked by hash."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import BinaryIO

from minichain.transaction import Transaction

__all__ = ["Block"]

_INDEX = struct.Struct("<i")
_LENGTH = struct.Struct("<Q")
_TIMESTAMP = struct.Struct("<q")


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def _unpack(stream: BinaryIO, fmt: struct.Struct) -> int:
    (value,) = fmt.unpack(_read_exact(stream, fmt.size))
    return value


def _write_text(stream: BinaryIO, text: str) -> None:
    raw = text.encode("utf-8")
    stream.write(_LENGTH.pack(len(raw)))
    stream.write(raw)


def _read_text(stream: BinaryIO) -> str:
    return _read_exact(stream, _unpack(stream, _LENGTH)).decode("utf-8")


@dataclass
class Block:
    """A block in the chain."""

    index: int = 0
    transactions: list[Transaction] = field(default_factory=list)
    previous_hash: str = ""
    hash: str = ""
    timestamp: int = 0

    def mine(self, difficulty: int) -> None:
        """Simulated proof of work: the block's hash is left unchanged."""
        if difficulty < 0:
            raise ValueError("difficulty must not be negative")

    def write_to(self, stream: BinaryIO) -> None:
        """Write the block to a binary stream."""
        stream.write(_INDEX.pack(self.index))
        stream.write(_LENGTH.pack(len(self.transactions)))
        for tx in self.transactions:
            tx.write_to(stream)
        _write_text(stream, self.hash)
        _write_text(stream, self.previous_hash)
        stream.write(_TIMESTAMP.pack(self.timestamp))

    @classmethod
    def read_from(cls, stream: BinaryIO) -> Block:
        """Read a block from a binary stream; raise EOFError if it is cut short."""
        index = _unpack(stream, _INDEX)
        count = _unpack(stream, _LENGTH)
        transactions = [Transaction.read_from(stream) for _ in range(count)]
        block_hash = _read_text(stream)
        previous_hash = _read_text(stream)
        timestamp = _unpack(stream, _TIMESTAMP)
        return cls(index, transactions, previous_hash, block_hash, timestamp)

    def __str__(self) -> str:
        lines = [
            f"Block Index: {self.index}",
            f"Previous Hash: {self.previous_hash}",
            f"Hash: {self.hash}",
        ]
        lines.extend(str(tx) for tx in self.transactions)
        return "\n".join(lines) + "\n"