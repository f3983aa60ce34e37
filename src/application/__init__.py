"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change state (register, login, refresh, ...)
- Queries: Read operations that fetch data (current user profile)

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- dtos/: Result dataclasses handed back to the presentation layer
- services/: Logic shared by several handlers

The application layer orchestrates domain logic through protocols only; it
never imports infrastructure.
"""
