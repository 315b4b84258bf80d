"""Command that builds a small chain, saves it, reloads it and checks it."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from minichain.blockchain import Blockchain
from minichain.transaction import Transaction

_DEFAULT_FILE = "blockchain.dat"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and report whether the reloaded chain is valid."""
    parser = argparse.ArgumentParser(
        prog="minichain",
        description="Mine two blocks, save the chain, load it back and validate it.",
    )
    parser.add_argument("file", nargs="?", default=_DEFAULT_FILE, help="where to save the chain")
    args = parser.parse_args(argv)

    chain = Blockchain()
    chain.add_transaction(Transaction("Alice", "Bob", 50.0))
    chain.mine_block()
    chain.add_transaction(Transaction("Bob", "Charlie", 30.0))
    chain.mine_block()

    chain.save(args.file)

    loaded = Blockchain()
    loaded.load(args.file)

    if loaded.is_chain_valid():
        print("Loaded blockchain is valid.")
    else:
        print("Loaded blockchain is NOT valid.")
    return 0