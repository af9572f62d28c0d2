"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- errors.py: domain exception to HTTP status mapping
"""
