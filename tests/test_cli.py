import json

import pytest

from hedkey.cli import main
from hedkey.private_key import PrivateKey

PRIVATE_KEY_STR = (
    "302e020100300506032b657004220420"
    "4072d365d02199b5103336cf6a187578ffb6eba4ad6f8b2383c5cc54d00c4409"
)
SEED_HEX = "4072d365d02199b5103336cf6a187578ffb6eba4ad6f8b2383c5cc54d00c4409"


def run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out


def test_generate(capsys):
    out = json.loads(run(capsys, "generate"))

    key = PrivateKey.from_string(out["private_key"])
    assert out["public_key"] == key.public_key().encode().hex()
    assert len(bytes.fromhex(out["chain_code"])) == 32


def test_inspect_normalises_raw_seed(capsys):
    out = json.loads(run(capsys, "inspect", SEED_HEX))

    assert out["encoding"] == "raw"
    assert out["private_key"] == PRIVATE_KEY_STR
    assert out["seed"] == SEED_HEX


def test_inspect_der(capsys):
    out = json.loads(run(capsys, "inspect", PRIVATE_KEY_STR))

    assert out["encoding"] == "der"
    assert out["private_key"] == PRIVATE_KEY_STR


def test_inspect_bad_length_exits(capsys):
    with pytest.raises(SystemExit) as info:
        main(["inspect", "00" * 48])

    assert info.value.code == 1
    assert "error:" in capsys.readouterr().err


def test_inspect_bad_hex_exits(capsys):
    with pytest.raises(SystemExit) as info:
        main(["inspect", "not hex"])

    assert info.value.code == 1
    assert "invalid hex" in capsys.readouterr().err


def test_sign_then_verify(capsys):
    signed = json.loads(run(capsys, "sign", "--key", PRIVATE_KEY_STR, "--message", "hello"))

    key = PrivateKey.from_string(PRIVATE_KEY_STR)
    assert signed["signature"] == key.sign(b"hello").hex()

    out = run(
        capsys,
        "verify",
        "--public-key", signed["public_key"],
        "--message-hex", b"hello".hex(),
        "--signature", signed["signature"],
    )
    assert out.strip() == "valid"


def test_verify_invalid_exits(capsys):
    key = PrivateKey.from_string(PRIVATE_KEY_STR)
    signature = key.sign(b"hello").hex()

    with pytest.raises(SystemExit) as info:
        main([
            "verify",
            "--public-key", key.public_key().encode().hex(),
            "--message", "goodbye",
            "--signature", signature,
        ])

    assert info.value.code == 1
    assert capsys.readouterr().out.strip() == "invalid"


def test_derive_from_seed(capsys):
    out = json.loads(run(capsys, "derive", "--seed", "000102030405060708090a0b0c0d0e0f", "--path", "m/0'"))

    expected = PrivateKey.from_seed(bytes(range(16))).derive(0)
    assert out["path"] == "m/0'"
    assert out["private_key"] == expected.to_string()
    assert out["chain_code"] == expected.chain_code.hex()


def test_derive_from_key_and_chain_code(capsys):
    parent = PrivateKey.generate()
    out = json.loads(run(
        capsys,
        "derive",
        "--key", parent.to_string(),
        "--chain-code", parent.chain_code.hex(),
        "--path", "m/1'/2'",
    ))

    assert out["private_key"] == parent.derive(1).derive(2).to_string()


def test_derive_key_without_chain_code_exits(capsys):
    with pytest.raises(SystemExit) as info:
        main(["derive", "--key", PRIVATE_KEY_STR, "--path", "m/0'"])

    assert info.value.code == 1


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as info:
        main([])

    assert info.value.code == 1
    assert "usage:" in capsys.readouterr().out
