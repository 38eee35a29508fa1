"""Base64, JSON and AES/DES/RSA encryption helpers."""

from __future__ import annotations

import base64
import binascii
import json
import re
import secrets
from enum import IntEnum
from typing import Any

from Crypto.Cipher import AES as _AESCipher
from Crypto.Cipher import DES as _DESCipher
from Crypto.Cipher import PKCS1_v1_5
from Crypto.PublicKey import RSA as _RSAKeys
from Crypto.PublicKey.RSA import RsaKey

_BYTES_DES = 8
_BYTES_AES128 = 16
_BYTES_AES192 = 24
_BYTES_AES256 = 32
_AES_KEY_LENGTHS = (_BYTES_AES128, _BYTES_AES192, _BYTES_AES256)

_KEY_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    "+-_=*./<>?(&^%$#@!~`)[]{}"
)

_URL_B64_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class EncryptionType(IntEnum):
    """Supported encryption algorithms."""

    AES = 0
    RSA = 1
    DES = 2


def _encryption_type(value: Any) -> EncryptionType:
    try:
        return EncryptionType(value)
    except ValueError:
        raise ValueError("invalid encryption type") from None


def _to_bytes(data: Any) -> bytes:
    if isinstance(data, str):
        return data.encode()
    return bytes(data)


def _string_key(key: Any) -> str:
    if not isinstance(key, str):
        raise TypeError("invalid key type")
    return key


def _json_dumps(data: Any) -> str:
    text = json.dumps(data, ensure_ascii=False, separators=(",", ":"), sort_keys=True)
    for char, escaped in _JSON_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


def _url_b64decode(text: str) -> bytes:
    if len(text) % 4 != 0 or not _URL_B64_RE.fullmatch(text):
        raise ValueError("illegal base64 data")
    return base64.urlsafe_b64decode(text)


def base64_std_encode(s: str) -> str:
    """Encode a string with standard padded base64."""
    return base64.b64encode(s.encode()).decode("ascii")


def base64_std_decode(s: str) -> str:
    """Decode standard base64; malformed input gives an empty string."""
    try:
        raw = base64.b64decode(s, validate=True)
    except (binascii.Error, ValueError):
        return ""
    return raw.decode("utf-8", errors="replace")


def basic_encode_to_json(data: Any) -> str:
    """Encode data as compact JSON text."""
    return _json_dumps(data)


def basic_decode_from_json(text: str) -> dict[str, Any] | None:
    """Decode JSON text that holds an object; null gives None."""
    data = json.loads(text)
    if data is not None and not isinstance(data, dict):
        raise ValueError("JSON value is not an object")
    return data


def _cfb_encrypt(module: Any, block_size: int, data: bytes, key: str) -> str:
    iv = secrets.token_bytes(block_size)
    cipher = module.new(key.encode(), module.MODE_CFB, iv=iv, segment_size=block_size * 8)
    return base64.urlsafe_b64encode(iv + cipher.encrypt(data)).decode("ascii")


def _cfb_decrypt(module: Any, block_size: int, encoded: str, key: str) -> bytes:
    key_bytes = key.encode()
    module.new(key_bytes, module.MODE_ECB)  # rejects a bad key before decoding
    raw = _url_b64decode(encoded)
    if len(raw) < block_size:
        raise ValueError("ciphertext is too short")
    iv, body = raw[:block_size], raw[block_size:]
    cipher = module.new(key_bytes, module.MODE_CFB, iv=iv, segment_size=block_size * 8)
    return cipher.decrypt(body)


def _encrypt_aes(data: bytes, key: str) -> str:
    return _cfb_encrypt(_AESCipher, _AESCipher.block_size, data, key)


def _decrypt_aes(encoded: str, key: str) -> bytes:
    return _cfb_decrypt(_AESCipher, _AESCipher.block_size, encoded, key)


def _encrypt_des(data: bytes, key: str) -> str:
    return _cfb_encrypt(_DESCipher, _DESCipher.block_size, data, key)


def _decrypt_des(encoded: str, key: str) -> bytes:
    return _cfb_decrypt(_DESCipher, _DESCipher.block_size, encoded, key)


def _encrypt_rsa(data: bytes, key: Any) -> str:
    if not isinstance(key, RsaKey) or key.has_private():
        raise TypeError("invalid key type")
    ciphertext = PKCS1_v1_5.new(key).encrypt(data)
    return base64.urlsafe_b64encode(ciphertext).decode("ascii")


def _decrypt_rsa(encoded: str, key: Any) -> bytes:
    if not isinstance(key, RsaKey) or not key.has_private():
        raise TypeError("invalid key type")
    ciphertext = _url_b64decode(encoded)
    sentinel = object()
    result = PKCS1_v1_5.new(key).decrypt(ciphertext, sentinel)
    if result is sentinel:
        raise ValueError("rsa decryption error")
    return result


def encrypt(data: bytes, key: Any, encryption_type: EncryptionType) -> str:
    """Encrypt data and return URL-safe base64 text.

    AES and DES take a string key and prepend a random IV (CFB mode);
    RSA takes a public key and uses PKCS#1 v1.5 padding.
    """
    kind = _encryption_type(encryption_type)
    payload = _to_bytes(data)
    if kind is EncryptionType.AES:
        return _encrypt_aes(payload, _string_key(key))
    if kind is EncryptionType.DES:
        return _encrypt_des(payload, _string_key(key))
    return _encrypt_rsa(payload, key)


def decrypt(encoded_data: str, key: Any, encryption_type: EncryptionType) -> bytes:
    """Decrypt text produced by encrypt()."""
    kind = _encryption_type(encryption_type)
    if kind is EncryptionType.AES:
        return _decrypt_aes(encoded_data, _string_key(key))
    if kind is EncryptionType.DES:
        return _decrypt_des(encoded_data, _string_key(key))
    return _decrypt_rsa(encoded_data, key)


def encode_json_with_key(data: Any, key: Any, encryption_type: EncryptionType) -> str:
    """Encode data as JSON, then encrypt it."""
    kind = _encryption_type(encryption_type)
    payload = _json_dumps(data).encode()
    return encrypt(payload, key, kind)


def decode_json_with_key(encoded_data: str, key: Any, encryption_type: EncryptionType) -> Any:
    """Decrypt text produced by encode_json_with_key() and decode its JSON."""
    plain = decrypt(encoded_data, key, encryption_type)
    return json.loads(plain)


def generate_rsa_key_pair(key_size: int) -> RsaKey:
    """Generate an RSA private key; its public half is key.publickey()."""
    return _RSAKeys.generate(key_size)


def _custom_encode(data: bytes) -> str:
    return "".join(_KEY_ALPHABET[b % len(_KEY_ALPHABET)] for b in data)


def generate_aes_key(key_length: int) -> str:
    """Random printable AES key of 16, 24 or 32 characters."""
    if key_length not in _AES_KEY_LENGTHS:
        raise ValueError("invalid key length")
    return _custom_encode(secrets.token_bytes(key_length))


def generate_des_key() -> str:
    """Random printable DES key of 8 characters."""
    return _custom_encode(secrets.token_bytes(_BYTES_DES))


def validate_aes_key(key: str) -> bool:
    """Tell whether the key's UTF-8 length suits AES."""
    return len(key.encode()) in _AES_KEY_LENGTHS


def validate_des_key(key: str) -> bool:
    """Tell whether the key's UTF-8 length suits DES."""
    return len(key.encode()) == _BYTES_DES