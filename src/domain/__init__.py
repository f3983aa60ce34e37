"""Domain layer - Pure business logic.

This layer contains the core business entities, value objects, errors and
protocols (ports). The domain layer has NO dependencies on any framework or
infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (User, RefreshTokenRecord)
- value_objects/: Value objects (token claims, rate limit rules)
- errors/: Domain error kinds (token, ledger, one-time token)
- protocols/: Ports implemented by infrastructure adapters
- validators/: Pure validation functions (email, name, password)
"""
