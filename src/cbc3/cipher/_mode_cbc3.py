from __future__ import annotations

from typing import Any

from cbc3._buffers import xor_bytes
from cbc3.protocols import BlockCipher

from ._mode_base import BaseCBC3Mode


class CBC3Encrypter(BaseCBC3Mode):
    """Triple Cipher Block Chaining (CBC3) encryption.

    Each plaintext block runs through three CBC passes, one per stage, with
    the middle pass inverted (encrypt, decrypt, encrypt). Every pass has its
    own feedback register, which is what SSH-1 triple DES requires.
    """

    direction = "encrypt"

    def encrypt(self, data: Any) -> bytes:
        """Encrypt data in CBC3 mode.

        Registers advance exactly as with :meth:`crypt_blocks`. Padding is not
        applied, so the input must already be block-aligned.

        Args:
            data: Plaintext bytes. Length must be a multiple of
                ``block_size``.

        Returns:
            Ciphertext bytes of the same length.

        Raises:
            UsageError: If the input length is not a multiple of
                ``block_size``.
        """
        return self._transform(data)

    def _crypt(self, dst: memoryview, src: memoryview) -> None:
        bs = self._block_size
        s1, s2, s3 = self._stages
        regs = self._registers

        for i in range(0, len(src), bs):
            # Three passes of CBC, with the middle one inverted.
            block = xor_bytes(src[i : i + bs], regs[:bs])
            block = self._check_block(s1.encrypt(block))
            regs[:bs] = block

            block = self._check_block(s2.decrypt(block))
            block = xor_bytes(block, regs[bs : 2 * bs])
            regs[bs : 2 * bs] = regs[:bs]

            block = xor_bytes(block, regs[2 * bs :])
            block = self._check_block(s3.encrypt(block))
            regs[2 * bs :] = block

            dst[i : i + bs] = block


class CBC3Decrypter(BaseCBC3Mode):
    """Triple Cipher Block Chaining (CBC3) decryption.

    The exact inverse of :class:`CBC3Encrypter` when built from the same
    stages, in the same order, with the same IV. Mismatched keys, IVs or
    stage order are not detected; they only yield wrong plaintext.
    """

    direction = "decrypt"

    def __init__(
        self,
        stage1: BlockCipher,
        stage2: BlockCipher,
        stage3: BlockCipher,
        iv: bytes | bytearray | memoryview,
    ) -> None:
        super().__init__(stage1, stage2, stage3, iv)
        self._scratch = bytearray(self._block_size)

    def decrypt(self, data: Any) -> bytes:
        """Decrypt data in CBC3 mode.

        Registers advance exactly as with :meth:`crypt_blocks`. Unpadding is
        not performed.

        Args:
            data: Ciphertext bytes. Length must be a multiple of
                ``block_size``.

        Returns:
            Plaintext bytes of the same length.

        Raises:
            UsageError: If the input length is not a multiple of
                ``block_size``.
        """
        return self._transform(data)

    def _crypt(self, dst: memoryview, src: memoryview) -> None:
        bs = self._block_size
        s1, s2, s3 = self._stages
        regs = self._registers
        tmp = self._scratch

        for i in range(0, len(src), bs):
            # dst may alias src, keep the ciphertext block for r2.
            tmp[:] = src[i : i + bs]
            block = self._check_block(s3.decrypt(bytes(tmp)))
            block = xor_bytes(block, regs[2 * bs :])
            regs[2 * bs :] = tmp

            block = xor_bytes(block, regs[bs : 2 * bs])
            block = self._check_block(s2.encrypt(block))
            regs[bs : 2 * bs] = block

            block = self._check_block(s1.decrypt(block))
            block = xor_bytes(block, regs[:bs])
            regs[:bs] = regs[bs : 2 * bs]

            dst[i : i + bs] = block


def new_encrypter(
    stage1: BlockCipher,
    stage2: BlockCipher,
    stage3: BlockCipher,
    iv: bytes | bytearray | memoryview,
) -> CBC3Encrypter:
    """Create a CBC3 encrypter over three block ciphers.

    The three ciphers must share one block size. They do not need to be the
    same algorithm, but the decrypting side must use the same ones in the
    same order. Using a different IV for each stage is recommended.

    Args:
        stage1: First block cipher stage.
        stage2: Second block cipher stage.
        stage3: Third block cipher stage.
        iv: Three concatenated IVs, ``3 * block_size`` bytes in total.

    Returns:
        A :class:`CBC3Encrypter`.

    Raises:
        ConstructionError: If the block sizes differ or the IV length is
            wrong.
    """
    return CBC3Encrypter(stage1, stage2, stage3, iv)


def new_decrypter(
    stage1: BlockCipher,
    stage2: BlockCipher,
    stage3: BlockCipher,
    iv: bytes | bytearray | memoryview,
) -> CBC3Decrypter:
    """Create a CBC3 decrypter over three block ciphers.

    Args:
        stage1: First block cipher stage, as used for encryption.
        stage2: Second block cipher stage, as used for encryption.
        stage3: Third block cipher stage, as used for encryption.
        iv: The IV the data was encrypted with, ``3 * block_size`` bytes.

    Returns:
        A :class:`CBC3Decrypter`.

    Raises:
        ConstructionError: If the block sizes differ or the IV length is
            wrong.
    """
    return CBC3Decrypter(stage1, stage2, stage3, iv)
