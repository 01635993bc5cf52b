"""
Quora Backend — Password Credential Encoder
=============================================

What:  Derives a salted one-way hash of a password and verifies candidates.
How:   passlib's pbkdf2_sha512 handler, pinned to an explicit salt so the
       same (password, salt) pair always yields the same hash string.
       The salt is stored in its own column next to the hash.

Contract:
    encode(password)        -> (salt, hash)   fresh random salt
    encode(password, salt)  -> hash           deterministic recomputation
    verify(password, salt, hash) -> bool

The plaintext is never logged or returned.
"""

import base64
import hmac
import secrets
from typing import Optional, Tuple, Union, overload

from passlib.hash import pbkdf2_sha512

from quora.config import settings


class PasswordEncoder:
    """
    Salted PBKDF2-SHA512 password encoder.

    Args:
        rounds:    PBKDF2 iteration count for new hashes
        salt_size: Number of random bytes in a fresh salt
    """

    def __init__(self, rounds: int = 29_000, salt_size: int = 32):
        self.rounds = rounds
        self.salt_size = salt_size

    @overload
    def encode(self, password: str) -> Tuple[str, str]: ...

    @overload
    def encode(self, password: str, salt: str) -> str: ...

    def encode(self, password: str, salt: Optional[str] = None) -> Union[str, Tuple[str, str]]:
        """
        Hash a password.

        Without a salt a fresh one is generated and `(salt, hash)` is
        returned. With a salt only the recomputed hash is returned.
        """
        if salt is None:
            fresh_salt = self._new_salt()
            return fresh_salt, self._hash(password, fresh_salt, self.rounds)
        return self._hash(password, salt, self.rounds)

    def verify(self, password: str, salt: str, password_hash: str) -> bool:
        """
        Recompute the hash with the stored salt and compare in constant time.

        The iteration count is read back from the stored hash, so raising
        `rounds` later does not lock out existing users.
        """
        try:
            rounds = pbkdf2_sha512.from_string(password_hash).rounds
        except ValueError:
            return False
        candidate = self._hash(password, salt, rounds)
        return hmac.compare_digest(candidate.encode("ascii"), password_hash.encode("ascii"))

    def _new_salt(self) -> str:
        return base64.b64encode(secrets.token_bytes(self.salt_size)).decode("ascii")

    @staticmethod
    def _hash(password: str, salt: str, rounds: int) -> str:
        raw_salt = base64.b64decode(salt.encode("ascii"))
        return pbkdf2_sha512.using(salt=raw_salt, rounds=rounds).hash(password)


password_encoder = PasswordEncoder(
    rounds=settings.password_hash_rounds,
    salt_size=settings.password_salt_size,
)
