"""
Quora Backend — Session Token Issuer
======================================

What:  Issues the bearer token handed to a client at sign-in.
How:   A JWT signed with the configured HMAC secret (python-jose). Claims:
         aud  public id of the signed-in user
         iat  login time
         exp  login time + session ttl
         iss  configured issuer
         jti  random id, so two sign-ins within the same second still
              produce distinct tokens

The rest of the system never decodes the token: validity is established by
looking it up in the session store. `decode()` is a diagnostic and test
helper; no request path calls it, and a decodable token is not an
authorized one.
"""

import uuid
from calendar import timegm
from datetime import datetime
from typing import Any, Dict

from jose import jwt

from quora.config import settings


class TokenIssuer:
    """Signs access tokens bound to a user and a validity window."""

    def __init__(self, secret: str, algorithm: str = "HS512", issuer: str = "https://quora.io"):
        self._secret = secret
        self.algorithm = algorithm
        self.issuer = issuer

    def issue(self, user_public_id: str, issued_at: datetime, expires_at: datetime) -> str:
        claims = {
            "aud": user_public_id,
            "iss": self.issuer,
            "iat": timegm(issued_at.utctimetuple()),
            "exp": timegm(expires_at.utctimetuple()),
            "jti": str(uuid.uuid4()),
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def decode(self, token: str, user_public_id: str) -> Dict[str, Any]:
        """
        Verify the signature and return the claims.

        Raises:
            jose.JWTError: bad signature, wrong audience/issuer, or expired
        """
        return jwt.decode(
            token,
            self._secret,
            algorithms=[self.algorithm],
            audience=user_public_id,
            issuer=self.issuer,
        )


token_issuer = TokenIssuer(
    secret=settings.jwt_secret,
    algorithm=settings.jwt_algorithm,
    issuer=settings.jwt_issuer,
)
