"""Unit tests for password hashing."""

import bcrypt

from acme_dashboard.core.security import BCRYPT_ROUNDS, hash_password, verify_password


def test_hash_is_not_plaintext_and_verifies():
    hashed = hash_password("123456")
    assert hashed != "123456"
    assert verify_password("123456", hashed)
    assert not verify_password("654321", hashed)


def test_hash_uses_cost_factor_ten():
    hashed = hash_password("123456")
    assert BCRYPT_ROUNDS == 10
    assert hashed.startswith("$2b$10$")


def test_hashes_are_salted():
    assert hash_password("same") != hash_password("same")


def test_custom_rounds():
    hashed = hash_password("secret", rounds=4)
    assert hashed.startswith("$2b$04$")
    assert bcrypt.checkpw(b"secret", hashed.encode("utf-8"))


def test_verify_rejects_malformed_hash():
    assert verify_password("123456", "not-a-bcrypt-hash") is False
