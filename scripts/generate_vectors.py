#!/usr/bin/env python3
import json
from pathlib import Path
from typing import Any, Dict
import sys

# Add repo root so Python can import hedkey.*
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# Project imports: use the stable reference API
from hedkey.reference_api import (
    seed_to_private_key_text,
    sk_to_pk,
    sign_message,
    derive_path,
)

VECTORS_PATH = ROOT / "tests" / "vectors" / "private_key.v1.json"


def load_vectors() -> Dict[str, Any]:
    with VECTORS_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)


def save_vectors(data: Dict[str, Any]) -> None:
    # Pretty-print and keep key order stable
    with VECTORS_PATH.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=False)
        f.write("\n")


def populate_canonical(data: Dict[str, Any]) -> None:
    for entry in data.get("canonical", []):
        seed = bytes.fromhex(entry["seed_hex"])
        entry["text"] = seed_to_private_key_text(seed)


def populate_signatures(data: Dict[str, Any]) -> None:
    for entry in data.get("signatures", []):
        seed = bytes.fromhex(entry["seed_hex"])
        message = bytes.fromhex(entry["message_hex"])

        entry["pk_hex"] = sk_to_pk(seed).hex()
        entry["sig_hex"] = sign_message(seed, message).hex()


def populate_slip10(data: Dict[str, Any]) -> None:
    slip10 = data["slip10"]
    seed = bytes.fromhex(slip10["seed_hex"])

    for node in slip10.get("nodes", []):
        sk, chain_code = derive_path(seed, node["path"])

        node["sk_hex"] = sk.hex()
        node["chain_code_hex"] = chain_code.hex()
        node["pk_hex"] = sk_to_pk(sk).hex()


def main() -> None:
    if not VECTORS_PATH.exists():
        raise SystemExit(f"Vector file not found: {VECTORS_PATH}")

    data = load_vectors()

    populate_canonical(data)
    populate_signatures(data)
    populate_slip10(data)

    save_vectors(data)
    print(f"Updated vectors written to {VECTORS_PATH}")


if __name__ == "__main__":
    main()
