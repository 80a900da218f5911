import json
from pathlib import Path

from hedkey.reference_api import (
    seed_to_private_key_text,
    private_key_text_to_seed,
    sk_to_pk,
    sign_message,
    master_from_seed,
    derive_path,
)

ROOT = Path(__file__).resolve().parents[1]
VECTORS_PATH = ROOT / "tests" / "vectors" / "private_key.v1.json"


def load_vectors():
    with VECTORS_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)


def test_canonical_text_vector():
    data = load_vectors()
    entry = next(e for e in data["canonical"] if e["id"] == "der-text")

    seed = private_key_text_to_seed(entry["text"])

    assert seed.hex() == entry["seed_hex"]
    assert seed_to_private_key_text(seed) == entry["text"]


def test_rfc8032_vectors():
    data = load_vectors()

    for entry in data["signatures"]:
        seed = bytes.fromhex(entry["seed_hex"])
        message = bytes.fromhex(entry["message_hex"])

        # Compare against frozen vectors
        assert sk_to_pk(seed).hex() == entry["pk_hex"], entry["id"]
        assert sign_message(seed, message).hex() == entry["sig_hex"], entry["id"]


def test_rfc8032_vector_through_der_encoding():
    data = load_vectors()
    entry = next(e for e in data["signatures"] if e["id"] == "rfc8032-test-1")

    der = bytes.fromhex(seed_to_private_key_text(bytes.fromhex(entry["seed_hex"])))

    assert sk_to_pk(der).hex() == entry["pk_hex"]


def test_slip10_master_vector():
    data = load_vectors()
    slip10 = data["slip10"]
    master = next(n for n in slip10["nodes"] if n["path"] == "m")

    sk, chain_code = master_from_seed(bytes.fromhex(slip10["seed_hex"]))

    assert sk.hex() == master["sk_hex"]
    assert chain_code.hex() == master["chain_code_hex"]
    assert sk_to_pk(sk).hex() == master["pk_hex"]


def test_slip10_child_vectors():
    data = load_vectors()
    slip10 = data["slip10"]
    seed = bytes.fromhex(slip10["seed_hex"])

    for node in slip10["nodes"]:
        sk, chain_code = derive_path(seed, node["path"])

        assert sk.hex() == node["sk_hex"], node["path"]
        assert chain_code.hex() == node["chain_code_hex"], node["path"]
        assert sk_to_pk(sk).hex() == node["pk_hex"], node["path"]
