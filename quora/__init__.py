"""
Quora Backend — Application Package Initializer
=================================================

Architecture Note:
    This backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Authorization, Rules)   │  ← Guard, ownership, roles
    ├─────────────────────────────────────┤
    │   Security (passwords, tokens)      │  ← pure helpers
    ├─────────────────────────────────────┤
    │   Stores (Entity Store interfaces)  │  ← SQLAlchemy implementation
    ├─────────────────────────────────────┤
    │   Models & Database (Persistence)   │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Services depend only on the abstract stores, so each layer can be
    tested with the layer below replaced.
"""

__version__ = "1.0.0"
