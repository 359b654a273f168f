"""Test suite for the Communities API.

Test structure follows the test pyramid:
- unit/: Unit tests - domain logic and handlers in isolation
- integration/: Integration tests - repository against a real database
- api/: API endpoint tests - HTTP contract and end-to-end flows

Database tests run against in-memory SQLite (aiosqlite).
"""
