from __future__ import annotations

from cbc3.protocols import BlockCipherFunc


class FuncBlockCipher:
    """Block cipher stage built from a pair of single-block callables.

    Useful when a primitive exposes bare ``encrypt_block``/``decrypt_block``
    functions instead of an object with ``encrypt``/``decrypt`` methods.
    """

    __slots__ = ("block_size", "_encrypt_block", "_decrypt_block")

    def __init__(
        self,
        encrypt_block: BlockCipherFunc,
        decrypt_block: BlockCipherFunc,
        block_size: int,
    ) -> None:
        """
        Args:
            encrypt_block: Callable that encrypts a single block of length
                ``block_size``.
            decrypt_block: Callable that decrypts a single block of length
                ``block_size``.
            block_size: Block size in bytes (for example, 8 for DES or
                16 for AES).
        """
        self.block_size = block_size
        self._encrypt_block = encrypt_block
        self._decrypt_block = decrypt_block

    def encrypt(self, block: bytes) -> bytes:
        return self._encrypt_block(block)

    def decrypt(self, block: bytes) -> bytes:
        return self._decrypt_block(block)
