import base64

import pytest

from cmmcore.encoder import (
    EncryptionType,
    base64_std_decode,
    base64_std_encode,
    basic_decode_from_json,
    basic_encode_to_json,
    decode_json_with_key,
    decrypt,
    encode_json_with_key,
    encrypt,
    generate_aes_key,
    generate_des_key,
    generate_rsa_key_pair,
    validate_aes_key,
    validate_des_key,
)


@pytest.fixture(scope="module")
def rsa_private_key():
    return generate_rsa_key_pair(1024)


def test_base64_std_encode_known_value():
    assert base64_std_encode("hello") == "aGVsbG8="


def test_base64_round_trip():
    assert base64_std_decode(base64_std_encode("xin chào")) == "xin chào"


def test_base64_std_decode_invalid_gives_empty():
    assert base64_std_decode("@@@") == ""


def test_json_round_trip():
    data = {"name": "cafe", "rooms": [1, 2, 3], "open": True}
    assert basic_decode_from_json(basic_encode_to_json(data)) == data


def test_json_decode_rejects_non_object():
    with pytest.raises(ValueError):
        basic_decode_from_json("[1, 2]")


def test_json_decode_rejects_malformed():
    with pytest.raises(ValueError):
        basic_decode_from_json("{not json")


@pytest.mark.parametrize("length", [16, 24, 32])
def test_aes_round_trip(length):
    aes_key = generate_aes_key(length)
    data = b"meeting room booking"
    encoded = encrypt(data, aes_key, EncryptionType.AES)
    assert decrypt(encoded, aes_key, EncryptionType.AES) == data
    assert len(base64.urlsafe_b64decode(encoded)) == 16 + len(data)


def test_aes_uses_random_iv():
    aes_key = generate_aes_key(16)
    first = encrypt(b"same", aes_key, EncryptionType.AES)
    second = encrypt(b"same", aes_key, EncryptionType.AES)
    assert first != second
    assert decrypt(first, aes_key, EncryptionType.AES) == decrypt(
        second, aes_key, EncryptionType.AES
    )


def test_des_round_trip():
    des_key = generate_des_key()
    data = b"wallet topup"
    encoded = encrypt(data, des_key, EncryptionType.DES)
    assert decrypt(encoded, des_key, EncryptionType.DES) == data
    assert len(base64.urlsafe_b64decode(encoded)) == 8 + len(data)


def test_aes_bad_key_length():
    bad_length = "x" * 5
    with pytest.raises(ValueError):
        encrypt(b"data", bad_length, EncryptionType.AES)


def test_aes_ciphertext_too_short():
    aes_key = generate_aes_key(16)
    short = base64.urlsafe_b64encode(b"abcd").decode()
    with pytest.raises(ValueError, match="too short"):
        decrypt(short, aes_key, EncryptionType.AES)


def test_symmetric_key_must_be_string():
    with pytest.raises(TypeError):
        encrypt(b"data", 12345, EncryptionType.AES)


def test_invalid_encryption_type():
    with pytest.raises(ValueError, match="invalid encryption type"):
        encrypt(b"data", generate_aes_key(16), 7)
    with pytest.raises(ValueError, match="invalid encryption type"):
        encode_json_with_key({}, generate_aes_key(16), 7)


def test_rsa_round_trip(rsa_private_key):
    public_key = rsa_private_key.publickey()
    encoded = encrypt(b"hello rsa", public_key, EncryptionType.RSA)
    assert decrypt(encoded, rsa_private_key, EncryptionType.RSA) == b"hello rsa"


def test_rsa_key_types_are_checked(rsa_private_key):
    public_key = rsa_private_key.publickey()
    with pytest.raises(TypeError):
        encrypt(b"x", rsa_private_key, EncryptionType.RSA)
    encoded = encrypt(b"x", public_key, EncryptionType.RSA)
    with pytest.raises(TypeError):
        decrypt(encoded, public_key, EncryptionType.RSA)


@pytest.mark.parametrize("kind", [EncryptionType.AES, EncryptionType.DES])
def test_json_with_symmetric_key_round_trip(kind):
    sym_key = generate_aes_key(32) if kind is EncryptionType.AES else generate_des_key()
    data = {"user": "alice", "amount": 15000}
    encoded = encode_json_with_key(data, sym_key, kind)
    assert decode_json_with_key(encoded, sym_key, kind) == data


def test_json_with_rsa_key_round_trip(rsa_private_key):
    data = {"a": 1}
    encoded = encode_json_with_key(data, rsa_private_key.publickey(), EncryptionType.RSA)
    assert decode_json_with_key(encoded, rsa_private_key, EncryptionType.RSA) == data


def test_json_with_key_rejects_non_string_key():
    with pytest.raises(TypeError):
        encode_json_with_key({"a": 1}, b"0123456789abcdef", EncryptionType.AES)


def test_generate_aes_key_lengths():
    for length in (16, 24, 32):
        generated = generate_aes_key(length)
        assert len(generated) == length
        assert validate_aes_key(generated)
    with pytest.raises(ValueError, match="invalid key length"):
        generate_aes_key(10)


def test_generate_des_key():
    generated = generate_des_key()
    assert len(generated.encode()) == 8
    assert validate_des_key(generated)


def test_validate_keys_count_bytes():
    assert validate_aes_key("é" * 8) is True
    assert validate_aes_key("x" * 15) is False
    assert validate_des_key("x" * 7) is False