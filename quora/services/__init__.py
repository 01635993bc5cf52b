# Services package init
"""
Quora Backend — Services Layer
===============================

What:  Business rules sitting between routes (HTTP) and stores (persistence).
How:   Each service receives its collaborators (stores, password encoder,
       token issuer, clock) through its constructor; quora.dependencies
       assembles them per request. Every public operation runs inside one
       `stores.transaction()`.

Service Inventory:
    - AuthorizationService: resolves the acting user from a bearer token
    - UserService:          sign-up, sign-in, sign-out, profile lookup
    - AdminService:         user deletion (admin only)
    - QuestionService:      question CRUD with ownership rules
    - AnswerService:        answer CRUD with ownership rules
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Default clock for services: timezone-aware UTC now."""
    return datetime.now(timezone.utc)
