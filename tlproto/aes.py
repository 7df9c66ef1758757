"""Message encryption helpers built on AES-256-IGE."""

from __future__ import annotations

import hashlib
import os

from .ige import generate_aes_ige, ige_decrypt, ige_encrypt


def _sha1(data: bytes) -> bytes:
    return hashlib.sha1(data).digest()


def _int_bytes(value: int) -> bytes:
    """Minimal big-endian representation; zero becomes empty."""
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def _place(buffer: bytearray, offset: int, data: bytes) -> None:
    """Copy as much of ``data`` as fits into ``buffer`` starting at ``offset``."""
    count = min(len(buffer) - offset, len(data))
    buffer[offset : offset + count] = data[:count]


def message_key(msg: bytes) -> bytes:
    """Return the 16-byte message key: the middle of the SHA-1 of ``msg``."""
    return _sha1(bytes(msg))[4:20]


def encrypt(msg: bytes, key: bytes) -> bytes:
    """Encrypt ``msg`` with an authorization key, zero-padding to whole blocks."""
    msg = bytes(msg)
    aes_key, aes_iv = generate_aes_ige(message_key(msg), key, False)
    padding = (16 - len(msg) % 16) & 15
    return ige_encrypt(msg + bytes(padding), aes_key, aes_iv)


def decrypt(msg: bytes, key: bytes, check_data: bytes) -> bytes:
    """Decrypt ``msg`` using the message key ``check_data`` and an authorization key."""
    aes_key, aes_iv = generate_aes_ige(check_data, key, True)
    return ige_decrypt(bytes(msg), aes_key, aes_iv)


def generate_temp_keys(nonce_second: int, nonce_server: int) -> tuple[bytes, bytes]:
    """Derive the temporary AES key and IV used during the key exchange."""
    if nonce_second is None:
        raise ValueError("nonce_second is None")
    if nonce_server is None:
        raise ValueError("nonce_server is None")

    second = _int_bytes(nonce_second)
    server = _int_bytes(nonce_server)

    t1 = bytearray(48)
    _place(t1, 0, second)
    _place(t1, 32, server)
    hash1 = _sha1(bytes(t1))

    t2 = bytearray(48)
    _place(t2, 0, server)
    _place(t2, 16, second)
    hash2 = _sha1(bytes(t2))

    tmp_key = bytearray(32)
    _place(tmp_key, 0, hash1)
    _place(tmp_key, 20, hash2[0:12])

    t3 = bytearray(64)
    _place(t3, 0, second)
    _place(t3, 32, second)
    hash3 = _sha1(bytes(t3))

    tmp_iv = bytearray(32)
    _place(tmp_iv, 0, hash2[12:20])
    _place(tmp_iv, 8, hash3)
    _place(tmp_iv, 28, second[0:4])

    return bytes(tmp_key), bytes(tmp_iv)


def encrypt_raw_with_temp_keys(msg: bytes, nonce_second: int, nonce_server: int) -> bytes:
    """Encrypt an already padded message with the temporary keys."""
    key, iv = generate_temp_keys(nonce_second, nonce_server)
    return ige_encrypt(bytes(msg), key, iv)


def encrypt_message_with_temp_keys(msg: bytes, nonce_second: int, nonce_server: int) -> bytes:
    """Prefix ``msg`` with its SHA-1, pad with random bytes and encrypt it."""
    msg = bytes(msg)
    digest = _sha1(msg)
    need_to_add = 16 - (len(digest) + len(msg)) % 16
    payload = digest + msg + os.urandom(need_to_add)
    return encrypt_raw_with_temp_keys(payload, nonce_second, nonce_server)


def decrypt_message_with_temp_keys(msg: bytes, nonce_second: int, nonce_server: int) -> bytes:
    """Decrypt a key-exchange answer and strip its hash prefix and random padding."""
    key, iv = generate_temp_keys(nonce_second, nonce_server)
    decoded = ige_decrypt(bytes(msg), key, iv)
    digest, body = decoded[:20], decoded[20:]

    for end in range(len(body) - 1, max(len(body) - 16, -1), -1):
        if _sha1(body[:end]) == digest:
            return body[:end]

    raise ValueError("couldn't trim message: hashes incompatible on more than 16 tries")