"""
Quora Backend — Credential Encoder & Token Issuer Tests
=========================================================

What we test:
    ✅ Same password + same salt → same hash; different salts → different hashes
    ✅ Fresh salts are random and decodable
    ✅ verify() accepts the right password and rejects the wrong one
    ✅ verify() survives a change of work factor and garbage hashes
    ✅ Tokens carry the user as audience and decode with the right secret
    ✅ Two tokens for the same user and instant still differ
"""

import base64
from datetime import datetime, timedelta, timezone

import pytest
from jose import JWTError

from quora.security.passwords import PasswordEncoder
from quora.security.tokens import TokenIssuer


class TestPasswordEncoder:

    def setup_method(self):
        self.encoder = PasswordEncoder(rounds=1000, salt_size=16)

    def test_encode_without_salt_returns_salt_and_hash(self):
        salt, password_hash = self.encoder.encode("hunter2")
        assert len(base64.b64decode(salt)) == 16
        assert password_hash.startswith("$pbkdf2-sha512$1000$")
        assert "hunter2" not in password_hash

    def test_same_salt_is_deterministic(self):
        salt, first = self.encoder.encode("hunter2")
        assert self.encoder.encode("hunter2", salt) == first

    def test_different_salts_give_different_hashes(self):
        salt_a, hash_a = self.encoder.encode("hunter2")
        salt_b, hash_b = self.encoder.encode("hunter2")
        assert salt_a != salt_b
        assert hash_a != hash_b

    def test_different_passwords_give_different_hashes(self):
        salt, _ = self.encoder.encode("x")
        assert self.encoder.encode("hunter2", salt) != self.encoder.encode("hunter3", salt)

    def test_verify(self):
        salt, password_hash = self.encoder.encode("hunter2")
        assert self.encoder.verify("hunter2", salt, password_hash) is True
        assert self.encoder.verify("Hunter2", salt, password_hash) is False

    def test_verify_uses_rounds_from_stored_hash(self):
        salt, password_hash = self.encoder.encode("hunter2")
        stronger = PasswordEncoder(rounds=2000, salt_size=16)
        assert stronger.verify("hunter2", salt, password_hash) is True

    def test_verify_rejects_malformed_hash(self):
        salt, _ = self.encoder.encode("hunter2")
        assert self.encoder.verify("hunter2", salt, "not-a-hash") is False


class TestTokenIssuer:

    def setup_method(self):
        self.issuer = TokenIssuer(secret="unit-test-secret", issuer="https://quora.io")
        self.now = datetime.now(timezone.utc).replace(microsecond=0)
        self.later = self.now + timedelta(hours=10)

    def test_issue_and_decode(self):
        token = self.issuer.issue("user-1", self.now, self.later)
        claims = self.issuer.decode(token, "user-1")
        assert claims["aud"] == "user-1"
        assert claims["iss"] == "https://quora.io"
        assert claims["exp"] - claims["iat"] == 10 * 3600

    def test_tokens_are_unique_per_issue(self):
        first = self.issuer.issue("user-1", self.now, self.later)
        second = self.issuer.issue("user-1", self.now, self.later)
        assert first != second

    def test_decode_with_wrong_secret_fails(self):
        token = self.issuer.issue("user-1", self.now, self.later)
        other = TokenIssuer(secret="another-secret")
        with pytest.raises(JWTError):
            other.decode(token, "user-1")

    def test_decode_for_other_user_fails(self):
        token = self.issuer.issue("user-1", self.now, self.later)
        with pytest.raises(JWTError):
            self.issuer.decode(token, "user-2")
