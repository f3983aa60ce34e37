"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. The presentation
layer is thin - it dispatches commands/queries to the application layer and
translates results to HTTP responses.

Structure:
- routers/api/v1/: /auth/* and /admin/users/* endpoints
- routers/api/v1/errors/: error body builder and global exception handlers
- routers/api/middleware/: auth guards, rate limiting, security headers
- routers/system.py: /health

The presentation layer depends on the application layer (dispatches
commands/queries) but contains NO business logic.
"""
