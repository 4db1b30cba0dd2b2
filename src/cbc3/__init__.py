from .cipher import CBC3Decrypter, CBC3Encrypter, new_decrypter, new_encrypter
from .errors import CBC3Error, ConstructionError, UsageError
from .protocols import BlockCipher
from .version import __version__ as __version__

__all__ = [
    "BlockCipher",
    "CBC3Decrypter",
    "CBC3Encrypter",
    "CBC3Error",
    "ConstructionError",
    "UsageError",
    "new_decrypter",
    "new_encrypter",
]

__title__ = "pycbc3"
__description__ = "Triple cipher block chaining (CBC3) for SSH-1 style block ciphers."
__license__ = "Apache-2.0"
