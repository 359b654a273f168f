"""Presentation layer - API endpoints and HTTP concerns.

FastAPI routers and endpoint definitions. The presentation layer is thin:
it dispatches commands/queries to the application layer and translates
results to HTTP responses (RFC 7807 on failure).

Structure:
- routers/api/v1/: API version 1 endpoints (RESTful resources)
- routers/api/middleware/: Request middleware (trace IDs)
- routers/system.py: Root, health and config endpoints
"""
