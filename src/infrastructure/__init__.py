"""Infrastructure layer - Adapters and external integrations.

Implementations of domain protocols (ports):
- persistence/: SQLAlchemy models, database manager, repositories
- logging/: structlog-backed logger adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
