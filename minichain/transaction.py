"""Transfers of value between two parties."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

__all__ = ["Transaction"]

_LENGTH = struct.Struct("<Q")
_AMOUNT = struct.Struct("<d")


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def _write_text(stream: BinaryIO, text: str) -> None:
    raw = text.encode("utf-8")
    stream.write(_LENGTH.pack(len(raw)))
    stream.write(raw)


def _read_text(stream: BinaryIO) -> str:
    (length,) = _LENGTH.unpack(_read_exact(stream, _LENGTH.size))
    return _read_exact(stream, length).decode("utf-8")


@dataclass
class Transaction:
    """A transfer of ``amount`` from ``sender`` to ``receiver``."""

    sender: str = ""
    receiver: str = ""
    amount: float = 0.0

    def write_to(self, stream: BinaryIO) -> None:
        """Write the transaction to a binary stream."""
        _write_text(stream, self.sender)
        _write_text(stream, self.receiver)
        stream.write(_AMOUNT.pack(self.amount))

    @classmethod
    def read_from(cls, stream: BinaryIO) -> Transaction:
        """Read a transaction from a binary stream; raise EOFError if it is cut short."""
        sender = _read_text(stream)
        receiver = _read_text(stream)
        (amount,) = _AMOUNT.unpack(_read_exact(stream, _AMOUNT.size))
        return cls(sender, receiver, amount)

    def __str__(self) -> str:
        return f"Sender: {self.sender}, Receiver: {self.receiver}, Amount: {self.amount:g}"