"""
SSH-1 style Triple-DES: three single-DES stages chained with CBC3.

Unlike standard 3DES-CBC (one EDE block cipher under one CBC pass), SSH-1
runs each DES stage under its own CBC pass, so three 8-byte IVs are needed.
"""

from __future__ import annotations

from Crypto.Cipher import DES

from cbc3.errors import ConstructionError
from cbc3.protocols import BlockCipher

from ._mode_cbc3 import CBC3Decrypter, CBC3Encrypter

block_size = 8
key_size = (16, 24)
iv_size = 3 * block_size


def _stages(key: bytes) -> tuple[BlockCipher, BlockCipher, BlockCipher]:
    """Build the three DES stages for a two-key or three-key layout.

    A 16-byte key uses ``k1, k2, k1`` (SSH-1 derives it as the MD5 of the
    passphrase); a 24-byte key uses ``k1, k2, k3``.
    """
    if len(key) not in key_size:
        raise ConstructionError("Invalid key size")

    k1 = key[:8]
    k2 = key[8:16]
    k3 = k1 if len(key) == 16 else key[16:24]
    return (
        DES.new(k1, DES.MODE_ECB),
        DES.new(k2, DES.MODE_ECB),
        DES.new(k3, DES.MODE_ECB),
    )


def new_encrypter(
    key: bytes | bytearray,
    iv: bytes | bytearray | None = None,
) -> CBC3Encrypter:
    """Create an SSH-1 Triple-DES encrypter.

    Args:
        key: A 16-byte (two-key) or 24-byte (three-key) DES key. Parity bits
            are ignored.
        iv: Three concatenated 8-byte IVs. If ``None``, a zero IV is used,
            as in SSH-1 private key files.

    Returns:
        A :class:`CBC3Encrypter` over three DES stages.

    Raises:
        ConstructionError: If the key or IV length is invalid.
    """
    s1, s2, s3 = _stages(bytes(key))
    return CBC3Encrypter(s1, s2, s3, bytes(iv_size) if iv is None else iv)


def new_decrypter(
    key: bytes | bytearray,
    iv: bytes | bytearray | None = None,
) -> CBC3Decrypter:
    """Create an SSH-1 Triple-DES decrypter.

    Args:
        key: The key used for encryption, 16 or 24 bytes.
        iv: The IV used for encryption. If ``None``, a zero IV is used.

    Returns:
        A :class:`CBC3Decrypter` over three DES stages.

    Raises:
        ConstructionError: If the key or IV length is invalid.
    """
    s1, s2, s3 = _stages(bytes(key))
    return CBC3Decrypter(s1, s2, s3, bytes(iv_size) if iv is None else iv)
