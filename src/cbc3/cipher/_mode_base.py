from __future__ import annotations

import abc
import logging
from typing import Any

from cbc3._buffers import as_readable, as_writable, inexact_overlap
from cbc3.errors import CBC3Error, ConstructionError, UsageError
from cbc3.protocols import BlockCipher

logger = logging.getLogger(__name__)


def _stage_block_size(stage: Any) -> int:
    bs = getattr(stage, "block_size", None)
    if not isinstance(bs, int) or isinstance(bs, bool) or bs <= 0:
        raise ConstructionError(
            f"Block cipher {type(stage).__name__} has no usable block_size"
        )
    return bs


class BaseCBC3Mode(abc.ABC):
    """Shared state of the CBC3 encrypting and decrypting modes.

    A mode instance wraps three *block cipher stages* of equal block size and
    keeps one feedback register per stage. The registers are stored back to
    back in a single buffer of ``3 * block_size`` bytes and evolve with every
    processed block, across calls, until :meth:`set_iv` replaces them.

    Instances are not safe for concurrent use. Independent streams need
    independent mode objects; the stage ciphers themselves may be shared if
    they allow it.
    """

    direction: str = ""

    def __init__(
        self,
        stage1: BlockCipher,
        stage2: BlockCipher,
        stage3: BlockCipher,
        iv: bytes | bytearray | memoryview,
    ) -> None:
        """Initialize a CBC3 mode instance.

        Args:
            stage1: First block cipher stage.
            stage2: Second block cipher stage (applied inverted).
            stage3: Third block cipher stage.
            iv: Three concatenated IVs, one per stage. Must be exactly
                ``3 * block_size`` bytes. The bytes are copied.

        Raises:
            ConstructionError: If the stages disagree on block size or the
                IV has the wrong length.
        """
        bs = _stage_block_size(stage1)
        if bs != _stage_block_size(stage2) or bs != _stage_block_size(stage3):
            raise ConstructionError(
                "Block size must be equal for all three block ciphers"
            )
        iv = memoryview(iv).tobytes()
        if len(iv) != 3 * bs:
            raise ConstructionError(
                "IV length must equal three times the cipher block size"
            )

        self._stages = (stage1, stage2, stage3)
        self._block_size = bs
        self._registers = bytearray(iv)
        logger.debug("CBC3 %s mode created (block size %d)", self.direction, bs)

    @property
    def block_size(self) -> int:
        """Block size in bytes shared by all three stages."""
        return self._block_size

    @property
    def iv(self) -> bytes:
        """Snapshot of the current feedback registers (``r0 || r1 || r2``)."""
        return bytes(self._registers)

    def set_iv(self, iv: bytes | bytearray | memoryview) -> None:
        """Restart chaining from a new IV.

        Args:
            iv: Three concatenated IVs. Must be exactly ``3 * block_size``
                bytes.

        Raises:
            UsageError: If the IV has the wrong length.
        """
        iv = memoryview(iv).tobytes()
        if len(iv) != len(self._registers):
            raise UsageError("Incorrect length IV")
        self._registers[:] = iv
        logger.debug("CBC3 %s mode registers reset", self.direction)

    def crypt_blocks(self, dst: Any, src: Any) -> None:
        """Transform whole blocks from ``src`` into ``dst``.

        ``dst`` may be the very same buffer as ``src`` for in-place operation,
        but must not otherwise share memory with it. Every check runs before
        anything is written.

        Args:
            dst: Writable buffer at least as long as ``src``.
            src: Input bytes. Length must be a multiple of ``block_size``.

        Raises:
            UsageError: If the input is not block-aligned, ``dst`` is too
                short or read-only, or the buffers partially overlap.
        """
        data = as_readable(src)
        out = as_writable(dst)
        n = len(data)
        if n % self._block_size:
            raise UsageError("Input not full blocks")
        if len(out) < n:
            raise UsageError("Output smaller than input")
        out = out[:n]
        if inexact_overlap(out, data):
            raise UsageError("Invalid buffer overlap")
        if n:
            self._crypt(out, data)

    def _transform(self, data: Any) -> bytes:
        out = bytearray(as_readable(data).nbytes)
        self.crypt_blocks(out, data)
        return bytes(out)

    def _check_block(self, block: bytes) -> bytes:
        if len(block) != self._block_size:
            raise CBC3Error(
                f"Block cipher returned {len(block)} bytes, "
                f"expected {self._block_size}"
            )
        return block

    @abc.abstractmethod
    def _crypt(self, dst: memoryview, src: memoryview) -> None:
        """Process validated, block-aligned, non-empty buffers."""
        ...
