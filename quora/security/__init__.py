# Security package init
"""
Quora Backend — Credential & Token Primitives
==============================================

    - passwords.py: PasswordEncoder (salted PBKDF2 via passlib)
    - tokens.py:    TokenIssuer (signed JWT access tokens via python-jose)

Both are pure helpers with no database access; the services receive them
through their constructors.
"""
