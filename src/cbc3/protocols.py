"""
Protocol definitions for the block ciphers consumed by CBC3 modes.

A CBC3 mode never implements a block cipher itself. It only needs a fixed
block size and single-block encrypt/decrypt operations, which is exactly what
PyCryptodome's ECB cipher objects already provide.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

BlockCipherFunc = Callable[[bytes], bytes]


@runtime_checkable
class BlockCipher(Protocol):
    """Protocol for a keyed single-block cipher.

    Attributes:
        block_size: Size of one block in bytes.
    """

    block_size: int

    def encrypt(self, block: bytes) -> bytes:
        """Encrypt exactly one block.

        Args:
            block: Plaintext block of length ``block_size``.

        Returns:
            The encrypted block, also ``block_size`` bytes long.
        """
        ...

    def decrypt(self, block: bytes) -> bytes:
        """Decrypt exactly one block.

        Args:
            block: Ciphertext block of length ``block_size``.

        Returns:
            The decrypted block, also ``block_size`` bytes long.
        """
        ...
