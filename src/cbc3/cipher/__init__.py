"""
CBC3 block-cipher modes and ready-made stage ciphers.
"""

__all__ = [
    "BaseCBC3Mode",
    "CBC3Decrypter",
    "CBC3Encrypter",
    "FuncBlockCipher",
    "new_decrypter",
    "new_encrypter",
]

from ._mode_base import BaseCBC3Mode
from ._mode_cbc3 import CBC3Decrypter, CBC3Encrypter, new_decrypter, new_encrypter
from .stages import FuncBlockCipher
