"""HTTP server for Unthink: FastAPI application, routers, services and middleware."""
