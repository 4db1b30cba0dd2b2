#!/usr/bin/env python3
"""
Throughput of CBC3 against plain CBC.

Usage:
  python scripts/benchmark.py [--size BYTES] [--rounds N]
"""

from __future__ import annotations

import argparse
import hashlib
import logging
from collections.abc import Callable
from typing import Any
from time import perf_counter

from Crypto.Cipher import AES, DES
from Crypto.Cipher import DES3 as RefDES3

import cbc3

# =========================
#   Config
# =========================

DEFAULT_SIZE = 148800
DEFAULT_ROUNDS = 3
KEY = hashlib.sha256(b"testit").digest()

logger = logging.getLogger("cbc3_benchmark")
logging.basicConfig(level=logging.INFO)

CryptFunc = Callable[[bytearray], None]


# =========================
#   Cases
# =========================


def cbc_case(factory: Callable[[], Any], decrypt: bool) -> CryptFunc:
    cipher = factory()
    op = cipher.decrypt if decrypt else cipher.encrypt

    def run(buf: bytearray) -> None:
        op(buf, output=buf)

    return run


def cbc3_case(
    stages: Callable[[], tuple[object, object, object]],
    iv_size: int,
    decrypt: bool,
) -> CryptFunc:
    make = cbc3.new_decrypter if decrypt else cbc3.new_encrypter
    mode = make(*stages(), bytes(iv_size))

    def run(buf: bytearray) -> None:
        mode.crypt_blocks(buf, buf)

    return run


def des_stages() -> tuple[object, object, object]:
    return (
        DES.new(KEY[:8], DES.MODE_ECB),
        DES.new(KEY[8:16], DES.MODE_ECB),
        DES.new(KEY[16:24], DES.MODE_ECB),
    )


def aes_stages(key_len: int) -> Callable[[], tuple[object, object, object]]:
    def build() -> tuple[object, object, object]:
        ecb = AES.new(KEY[:key_len], AES.MODE_ECB)
        return ecb, ecb, ecb

    return build


def build_cases() -> dict[str, CryptFunc]:
    des3_key = RefDES3.adjust_key_parity(KEY[:24])
    cases: dict[str, CryptFunc] = {}
    for decrypt in (False, True):
        suffix = "Decrypt" if decrypt else "Encrypt"
        cases[f"CBC_DES_{suffix}"] = cbc_case(
            lambda: DES.new(KEY[:8], DES.MODE_CBC, iv=bytes(8)), decrypt
        )
        cases[f"CBC_3DES_{suffix}"] = cbc_case(
            lambda: RefDES3.new(des3_key, RefDES3.MODE_CBC, iv=bytes(8)), decrypt
        )
        cases[f"CBC3_DES_{suffix}"] = cbc3_case(des_stages, 24, decrypt)
        for key_len in (16, 24, 32):
            bits = key_len * 8
            cases[f"CBC_AES{bits}_{suffix}"] = cbc_case(
                lambda k=key_len: AES.new(KEY[:k], AES.MODE_CBC, iv=bytes(16)),
                decrypt,
            )
            cases[f"CBC3_AES{bits}_{suffix}"] = cbc3_case(
                aes_stages(key_len), 48, decrypt
            )
    return cases


# =========================
#   Main
# =========================


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS)
    args = parser.parse_args()

    size = args.size - args.size % 48
    if size <= 0:
        logger.error("Buffer size must be at least 48 bytes")
        return 1

    logger.info("Benchmarking %d bytes x %d rounds", size, args.rounds)
    buf = bytearray(size)

    print(f"{'case':<22} {'MB/s':>10}")
    for name, run in build_cases().items():
        start = perf_counter()
        for _ in range(args.rounds):
            run(buf)
        elapsed = perf_counter() - start
        rate = size * args.rounds / elapsed / 1e6 if elapsed else float("inf")
        print(f"{name:<22} {rate:>10.2f}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
