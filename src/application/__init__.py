"""Application layer - Use cases and orchestration.

Use cases following the CQRS pattern:
- Commands: Write operations (create, replace, delete communities)
- Queries: Read operations (get, list communities)

Structure:
- commands/: Command dataclasses and handlers
- queries/: Query dataclasses and handlers
- dtos/: Result DTOs returned to the presentation layer
- errors/: ApplicationError and its codes

The application layer orchestrates domain logic and never touches HTTP.
"""
