"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- persistence/: SQLAlchemy models, Database, repositories (users, ledger)
- security/: bcrypt hashing, JWT codec, one-time token generation
- rate_limit/: fixed-window counters (memory, Redis)
- logging/: structlog console adapter
- email/: stub email service

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
