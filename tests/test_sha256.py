import hashlib

import pytest

from minichain.sha256 import sha256_hex


def test_empty_string_digest():
    assert sha256_hex("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_abc_digest():
    assert sha256_hex("abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


@pytest.mark.parametrize("length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_matches_hashlib_at_padding_boundaries(length):
    data = bytes((i * 7 + 3) % 256 for i in range(length))
    assert sha256_hex(data) == hashlib.sha256(data).hexdigest()


def test_text_is_hashed_as_utf8():
    text = "区块链 blockchain"
    assert sha256_hex(text) == hashlib.sha256(text.encode("utf-8")).hexdigest()
    assert sha256_hex(text) == sha256_hex(text.encode("utf-8"))


def test_digest_shape():
    digest = sha256_hex("hello world")
    assert len(digest) == 64
    assert digest == digest.lower()
    assert set(digest) <= set("0123456789abcdef")


def test_bytearray_input():
    data = bytearray(b"some bytes")
    assert sha256_hex(data) == hashlib.sha256(bytes(data)).hexdigest()