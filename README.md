# minichain

minichain is a small blockchain of transactions. Transactions wait in a pool until a block is mined. Mining moves every pooled transaction into a new block, which is appended to the chain. The chain can be checked for consistency, and it can be saved to a binary file and loaded back. The package also includes a SHA-256 implementation written in pure Python.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
minichain [FILE]
```

The command runs a fixed demonstration:

1. It records a transaction from Alice to Bob for 50 and mines it into a block.
2. It records a transaction from Bob to Charlie for 30 and mines that into a second block.
3. It saves the chain to `FILE`. The default is `blockchain.dat` in the current directory.
4. It loads the file into a new chain, validates it and prints either `Loaded blockchain is valid.` or `Loaded blockchain is NOT valid.`

Mining does not set block hashes (see below), so the demonstration reports that the loaded chain is not valid.

## Library use

```python
from minichain.blockchain import Blockchain
from minichain.transaction import Transaction

chain = Blockchain()                     # starts with a genesis block (index 0, previous hash "0")
chain.add_transaction(Transaction("Alice", "Bob", 50.0))
block = chain.mine_block()               # the new Block, or None if the pool was empty

chain.save("ledger.dat")

restored = Blockchain()
restored.load("ledger.dat")
for tx in restored.all_transactions():   # every transaction, oldest first
    print(tx)                            # Sender: Alice, Receiver: Bob, Amount: 50
restored.print_chain()
print(restored.is_chain_valid())
```

`Blockchain.mine_block`, `save`, `load` and `is_chain_valid` print status messages to standard output.

- `is_chain_valid` checks each block after the genesis block. A block passes only if its `hash` equals its index followed by its `previous_hash`, and its `previous_hash` equals the hash of the block before it. The method prints the first failure it finds and then returns `False`.
- `save` and `load` raise `OSError` when the file cannot be opened.
- `load` raises `EOFError` when the file is cut short. In that case the current chain is left unchanged.

Hashing:

```python
from minichain.sha256 import sha256_hex

sha256_hex("abc")
# 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
```

`sha256_hex` accepts `str` or `bytes`. Text is encoded as UTF-8 before it is hashed.

## Classes

- `Transaction(sender, receiver, amount)` is a dataclass.
- `Block(index, transactions, previous_hash, hash, timestamp)` is a dataclass.

Both classes have the following serialisation methods:

- `write_to(stream)` writes the object to an open binary stream.
- `read_from(stream)` is a class method that reads the object back from an open binary stream. It raises `EOFError` on truncated data.

## File format

All values are little-endian. Strings are written as a 64-bit unsigned byte length followed by UTF-8 bytes.

- **File:** a 64-bit unsigned block count, followed by the blocks.
- **Block:**
  1. a 32-bit signed index
  2. a 64-bit unsigned transaction count
  3. the transactions
  4. the hash
  5. the previous hash
  6. a 64-bit signed timestamp
- **Transaction:**
  1. the sender
  2. the receiver
  3. a 64-bit float amount

## What it does not do

- **Mining:** `Block.mine` is a placeholder. It checks that the difficulty is not negative. It performs no proof of work, and it does not compute or set the block's hash or timestamp.
- **Hashes:** newly mined blocks keep an empty `hash`, and the chain never calls `sha256_hex`. As a result, any chain with mined blocks fails `is_chain_valid`.
- **Networking:** there is no peer networking, consensus, signing or wallet handling.

## Running the tests

```
pytest
```