#!/usr/bin/env python3
import argparse
import json
import logging
import sys

from .core import decode_hex, detect_encoding, encode_hex
from .private_key import PrivateKey
from .signature import public_key_to_hex, verify_signature_hex


def _message_bytes(args) -> bytes:
    if args.message_hex is not None:
        return decode_hex(args.message_hex)
    return args.message.encode("utf-8")


def _key_summary(key: PrivateKey) -> dict:
    return {
        "private_key": key.to_string(),
        "public_key": public_key_to_hex(key.public_key()),
        "chain_code": encode_hex(key.chain_code) if key.chain_code is not None else None,
    }


def cmd_generate(args):
    """
    hedkey generate
    """
    print(json.dumps(_key_summary(PrivateKey.generate()), indent=2))


def cmd_inspect(args):
    """
    hedkey inspect <hex key>
    """
    raw = decode_hex(args.key)
    key = PrivateKey.from_bytes(raw)

    out = {
        "encoding": detect_encoding(raw),
        "private_key": key.to_string(),
        "seed": encode_hex(key.to_bytes()),
        "public_key": public_key_to_hex(key.public_key()),
    }
    print(json.dumps(out, indent=2))


def cmd_sign(args):
    """
    hedkey sign --key <hex key> --message "hello"
    """
    key = PrivateKey.from_string(args.key)
    signature = key.sign(_message_bytes(args))

    out = {
        "public_key": public_key_to_hex(key.public_key()),
        "signature": encode_hex(signature),
    }
    print(json.dumps(out, indent=2))


def cmd_verify(args):
    """
    hedkey verify --public-key <hex> --message "hello" --signature <hex>
    """
    ok = verify_signature_hex(args.public_key, _message_bytes(args), args.signature)
    if ok:
        print("valid")
    else:
        print("invalid")
        sys.exit(1)


def cmd_derive(args):
    """
    hedkey derive --seed <hex> --path "m/44'/3030'/0'"
    hedkey derive --key <hex key> --chain-code <hex> --path "m/0'"
    """
    if args.seed is not None:
        parent = PrivateKey.from_seed(decode_hex(args.seed))
    else:
        if args.chain_code is None:
            print("error: --key requires --chain-code", file=sys.stderr)
            sys.exit(1)
        seed = PrivateKey.from_string(args.key).to_bytes()
        parent = PrivateKey(seed, decode_hex(args.chain_code))

    child = parent.derive_path(args.path)

    out = {"path": args.path}
    out.update(_key_summary(child))
    print(json.dumps(out, indent=2))


def _add_message_args(parser):
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--message", help="message as UTF-8 text")
    group.add_argument("--message-hex", help="message as hex bytes")


def build_parser():
    p = argparse.ArgumentParser(prog="hedkey", description="Ed25519 private key tool")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = p.add_subparsers(dest="cmd")

    # generate
    g = sub.add_parser("generate", help="generate a new private key")
    g.set_defaults(func=cmd_generate)

    # inspect
    i = sub.add_parser("inspect", help="parse a private key and show its canonical form")
    i.add_argument("key", help="private key hex (32, 48 DER or 64 bytes)")
    i.set_defaults(func=cmd_inspect)

    # sign
    s = sub.add_parser("sign", help="sign a message")
    s.add_argument("--key", required=True, help="private key hex")
    _add_message_args(s)
    s.set_defaults(func=cmd_sign)

    # verify
    v = sub.add_parser("verify", help="verify a signature")
    v.add_argument("--public-key", required=True, help="32-byte public key in hex")
    v.add_argument("--signature", required=True, help="64-byte signature in hex")
    _add_message_args(v)
    v.set_defaults(func=cmd_verify)

    # derive
    d = sub.add_parser("derive", help="derive a hardened child key")
    source = d.add_mutually_exclusive_group(required=True)
    source.add_argument("--seed", help="16 to 64 byte binary seed in hex")
    source.add_argument("--key", help="parent private key hex")
    d.add_argument("--chain-code", help="parent chain code hex (with --key)")
    d.add_argument("--path", required=True, help="derivation path, e.g. m/44'/3030'/0'")
    d.set_defaults(func=cmd_derive)

    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
