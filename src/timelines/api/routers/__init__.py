"""FastAPI routers for TimeLines."""
