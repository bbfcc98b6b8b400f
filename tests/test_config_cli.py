import pytest

from simpleaes import cli
from simpleaes.common import config
from simpleaes.common.utils import b64d, to_bytes

KEY = "0123456789abcdef"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("AES_SECRET", raising=False)
    monkeypatch.delenv("AES_SECRET_ENCODING", raising=False)


def test_decode_secret_encodings():
    assert config.decode_secret(KEY) == KEY.encode()
    assert config.decode_secret("MDEyMzQ1Njc4OWFiY2RlZg==", "base64") == KEY.encode()
    assert config.decode_secret(KEY.encode().hex(), "hex") == KEY.encode()
    with pytest.raises(ValueError):
        config.decode_secret(KEY, "rot13")


def test_get_secret_from_env(monkeypatch):
    monkeypatch.setenv("AES_SECRET", KEY.encode().hex())
    monkeypatch.setenv("AES_SECRET_ENCODING", "hex")
    assert config.get_secret() == KEY.encode()


def test_explicit_secret_wins(monkeypatch):
    monkeypatch.setenv("AES_SECRET", "ignored-ignored!")
    assert config.get_secret(KEY) == KEY.encode()


def test_missing_secret():
    with pytest.raises(ValueError):
        config.get_secret()


def test_to_bytes():
    assert to_bytes("é") == "é".encode("utf-8")
    assert to_bytes(bytearray(b"ab")) == b"ab"
    with pytest.raises(TypeError):
        to_bytes(None)


def test_cli_round_trip(capsys):
    assert cli.main(["--key", KEY, "encrypt", "hello"]) == 0
    ct = capsys.readouterr().out.strip()
    assert cli.main(["--key", KEY, "decrypt", ct]) == 0
    assert capsys.readouterr().out.strip() == "hello"


def test_cli_uses_env_secret(monkeypatch, capsys):
    monkeypatch.setenv("AES_SECRET", KEY)
    assert cli.main(["encrypt", "hello"]) == 0
    ct = capsys.readouterr().out.strip()
    assert cli.main(["--key", KEY, "decrypt", ct]) == 0
    assert capsys.readouterr().out.strip() == "hello"


def test_cli_bad_ciphertext(capsys):
    assert cli.main(["--key", KEY, "decrypt", "not-base64!!"]) == 1
    assert "Error" in capsys.readouterr().err


def test_cli_missing_key(capsys):
    assert cli.main(["encrypt", "hello"]) == 1
    assert "AES_SECRET" in capsys.readouterr().err


def test_cli_genkey(capsys):
    assert cli.main(["genkey", "--size", "24"]) == 0
    assert len(b64d(capsys.readouterr().out.strip())) == 24
