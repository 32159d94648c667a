"""Presentation layer - HTTP concerns only.

FastAPI routers translate requests into application-service calls and
Result values into HTTP responses. No business logic lives here.

Structure:
- api/middleware: ASGI middleware (request tracing)
- routers/api: auth and admin-session endpoints, auth dependency, RFC 7807 errors
- routers/system: root and health endpoints
"""
