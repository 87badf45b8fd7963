"""HTTP API for TimeLines (FastAPI)."""
