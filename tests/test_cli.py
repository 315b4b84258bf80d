from minichain.blockchain import Blockchain
from minichain.cli import main
from minichain.transaction import Transaction


def test_main_output(tmp_path, capsys):
    path = tmp_path / "chain.dat"
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Block mined successfully!",
        "Block mined successfully!",
        f"Blockchain saved to {path} successfully.",
        f"Blockchain loaded from {path} successfully.",
        "Block 1 has invalid hash.",
        "Loaded blockchain is NOT valid.",
    ]


def test_main_writes_loadable_file(tmp_path, capsys):
    path = tmp_path / "chain.dat"
    main([str(path)])
    chain = Blockchain()
    chain.load(path)
    assert len(chain.chain) == 3
    assert chain.all_transactions() == [
        Transaction("Alice", "Bob", 50.0),
        Transaction("Bob", "Charlie", 30.0),
    ]


def test_main_default_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert (tmp_path / "blockchain.dat").is_file()
    assert "Blockchain saved to blockchain.dat successfully." in capsys.readouterr().out