"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- middleware/: Correlation ID and request metrics
- static/: Browser page that calls the API and keeps a local history
"""
