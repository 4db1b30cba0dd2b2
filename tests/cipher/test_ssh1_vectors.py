from __future__ import annotations

import base64
import hashlib

from Crypto.Cipher import DES

from cbc3 import new_decrypter, new_encrypter
from cbc3.cipher import DES3

# SSH-1 RSA private key file for "rsa-key-20220918", stored once without a
# passphrase and once under passphrase "testit" (3DES, cipher type 3).
SSH1_UNENCRYPTED = base64.b64decode(
    "U1NIIFBSSVZBVEUgS0VZIEZJTEUgRk9STUFUIDEuMQoAAAAAAAAAAAQABACyVhLTcHAKqu8YkxMR"
    "fuq2ZtvfBAZ/ZD+TT6+sjhLSTQ+YjO2twb3Ku8eYiTKFcT40mSaMhq0Ei9YG1iGyLdDJLUF4s4HO"
    "ua138J1SQJac1BDzWBy+PUqoeRk2TuvvwVFAUZ8ZlMz8suw7WvWWYnkqPVCCiHVDNLm9awpBP1y8"
    "lQAGJQAAABByc2Eta2V5LTIwMjIwOTE4u3i7eAP+MDLwVNJHy4gk8eKPiDAjwphXGa4PmA1BnW97"
    "lmuWYloENxFU/odjukCWz0esyh6bMM9yM9FfMalAw5PRwXQqlsg6xz/LY7tguSxtlBDxwluOnCcv"
    "7EereEdcSGTTB5iEZOcxRJrvMgIUQlHSzc9uDAnPslFOuADLrYeR7/uUhkUB/jGTA5jF6NDanWN2"
    "xyRCO1dumGfkhexTqGRA5WtUz/DxHZch1iD3Ek8dC0OF2jr7f8Ig3PbC4RfHyNd0pOZNTK4CALwe"
    "cv5UIIslQKzt3POQpi3P8YAaE7oed/Di6m/325lS6AB4bfWIaAQeywg9Nep/meiS1AuDslwBl/5s"
    "+JbXC5MCAPKv8Ukjifk78IWznkGHdFN+Jno3wEbLWeaUDNBNq0B64vm9LchpKHPo4VcsZvh7/WOj"
    "mraBgaKTVpCa6lJ5wDcAAAAA"
)

SSH1_ENCRYPTED = base64.b64decode(
    "U1NIIFBSSVZBVEUgS0VZIEZJTEUgRk9STUFUIDEuMQoAAwAAAAAAAAQABACyVhLTcHAKqu8YkxMR"
    "fuq2ZtvfBAZ/ZD+TT6+sjhLSTQ+YjO2twb3Ku8eYiTKFcT40mSaMhq0Ei9YG1iGyLdDJLUF4s4HO"
    "ua138J1SQJac1BDzWBy+PUqoeRk2TuvvwVFAUZ8ZlMz8suw7WvWWYnkqPVCCiHVDNLm9awpBP1y8"
    "lQAGJQAAABByc2Eta2V5LTIwMjIwOTE4jGWS/2YMLF+EayIjJtsJYvfV5ZRhfWwvW6uZm9I+6Qyq"
    "Jg2Rts81YB7iwlMBBEWxdHi+gOIx3p5RpP48QlXGXnv/8vv62yR/iadL802Rto6uIwN9WA8KGZ/a"
    "+pe64e8xa3sYX9622XCT4pA8lB3Mb9+AiBzra+GSH8wLlU6k9IZusvCwK+/ToBlFCrWAeKLKHNBK"
    "VuR2QjspFldSXj46AsUmTrFYgATQHCW8BkfMtZFYTFFi+ZkgrZMOM2hg0p4gVMNVw5YQLPdiyLjm"
    "SKxOEFB/z1YygVd5PKS9rF3fw2UeSSXq02hoGEotZwmRMa7QAN4hJ7N/8KlDB9M1768mcOY9TD2j"
    "Dv3NsaCgX0rD8+juS+L59QZyP9gOcOSIPq2o5etDcDKdZFPLDYKqAbKQK/As/5+1WRXfLy/XjTfN"
    "Psg/DuQZf57RNQ3+y9wy2yqK"
)

# Offset of the encrypted private part. Its first four bytes are the
# check bytes, which differ between the two files.
PRIVATE_OFFSET = 195


def ssh1_stages():
    key = hashlib.md5(b"testit").digest()
    return (
        DES.new(key[:8], DES.MODE_ECB),
        DES.new(key[8:], DES.MODE_ECB),
        DES.new(key[:8], DES.MODE_ECB),
    )


def test_ssh1_private_part_is_block_aligned():
    assert len(SSH1_UNENCRYPTED) == len(SSH1_ENCRYPTED)
    assert (len(SSH1_ENCRYPTED) - PRIVATE_OFFSET) % 8 == 0


def test_ssh1_encrypt():
    plain = bytearray(SSH1_UNENCRYPTED[PRIVATE_OFFSET:])
    plain[:4] = bytes([111, 130, 111, 130])

    mode = new_encrypter(*ssh1_stages(), bytes(24))
    out = bytearray(len(plain))
    mode.crypt_blocks(out, plain)

    assert out[4:] == SSH1_ENCRYPTED[PRIVATE_OFFSET + 4 :]


def test_ssh1_decrypt():
    encrypted = SSH1_ENCRYPTED[PRIVATE_OFFSET:]

    mode = new_decrypter(*ssh1_stages(), bytes(24))
    out = bytearray(len(encrypted))
    mode.crypt_blocks(out, encrypted)

    assert out[4:] == SSH1_UNENCRYPTED[PRIVATE_OFFSET + 4 :]
    # check bytes: two random bytes, repeated
    assert out[0:2] == out[2:4]


def test_ssh1_des3_two_key_layout_matches_explicit_stages():
    key = hashlib.md5(b"testit").digest()
    encrypted = SSH1_ENCRYPTED[PRIVATE_OFFSET:]

    plain = DES3.new_decrypter(key).decrypt(encrypted)

    assert plain[4:] == SSH1_UNENCRYPTED[PRIVATE_OFFSET + 4 :]


def test_des3_example_ciphertext_with_prefixed_iv():
    key = hashlib.sha224(b"testit").digest()[:24]
    ciphertext = bytearray.fromhex(
        "da87200e69c4d5af38720c036849c79a4e3561a32e34613a"
        "d04633e7a048a80d0db32b1c6c3ba72e"
    )
    iv = ciphertext[: DES3.iv_size]
    body = memoryview(ciphertext)[DES3.iv_size :]

    mode = DES3.new_decrypter(key, iv=iv)
    mode.crypt_blocks(body, body)

    assert bytes(body) == b"exampleplaintext"
