"""Domain layer - Pure business logic.

Core entities, value objects, enums, and protocols (ports). The domain layer
has NO dependencies on any framework or infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (Community)
- value_objects/: Value objects (PageWindow)
- enums/: Enumerations (CommunitySortKey)
- errors/: Error message constants
- protocols/: Repository and logger interfaces
"""
