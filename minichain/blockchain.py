"""A chain of blocks with a pool of pending transactions."""

from __future__ import annotations

import os
import struct
from typing import BinaryIO

from minichain.block import Block
from minichain.transaction import Transaction

__all__ = ["Blockchain"]

_COUNT = struct.Struct("<Q")
_MINING_DIFFICULTY = 2


def _read_count(stream: BinaryIO) -> int:
    data = stream.read(_COUNT.size)
    if len(data) != _COUNT.size:
        raise EOFError(f"expected {_COUNT.size} bytes, got {len(data)}")
    (count,) = _COUNT.unpack(data)
    return count


class Blockchain:
    """A chain starting at a genesis block, plus pending transactions."""

    def __init__(self) -> None:
        self.chain: list[Block] = [Block(0, [], "0")]
        self.transaction_pool: list[Transaction] = []

    def add_transaction(self, tx: Transaction) -> None:
        """Queue a transaction for the next block."""
        self.transaction_pool.append(tx)

    def mine_block(self) -> Block | None:
        """Pack the pending transactions into a new block and append it.

        Returns the new block, or None when there was nothing to mine.
        """
        if not self.transaction_pool:
            print("No transactions to mine.")
            return None
        block = Block(len(self.chain), list(self.transaction_pool), self.chain[-1].hash)
        block.mine(_MINING_DIFFICULTY)
        self.chain.append(block)
        self.transaction_pool.clear()
        print("Block mined successfully!")
        return block

    def is_chain_valid(self) -> bool:
        """Check every block's hash and its link to the block before it."""
        for previous, current in zip(self.chain, self.chain[1:]):
            if current.hash != f"{current.index}{current.previous_hash}":
                print(f"Block {current.index} has invalid hash.")
                return False
            if current.previous_hash != previous.hash:
                print(f"Block {current.index} has invalid previous hash.")
                return False
        return True

    def all_transactions(self) -> list[Transaction]:
        """Return every transaction on the chain, oldest first."""
        return [tx for block in self.chain for tx in block.transactions]

    def print_chain(self) -> None:
        """Print every block in order."""
        for block in self.chain:
            print(block, end="")

    def save(self, filename: str | os.PathLike[str]) -> None:
        """Write the chain to a binary file."""
        with open(filename, "wb") as out:
            out.write(_COUNT.pack(len(self.chain)))
            for block in self.chain:
                block.write_to(out)
        print(f"Blockchain saved to {os.fspath(filename)} successfully.")

    def load(self, filename: str | os.PathLike[str]) -> None:
        """Replace the chain with one read from a binary file."""
        with open(filename, "rb") as src:
            count = _read_count(src)
            chain = [Block.read_from(src) for _ in range(count)]
        self.chain = chain
        print(f"Blockchain loaded from {os.fspath(filename)} successfully.")