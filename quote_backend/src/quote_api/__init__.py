"""
FastAPI Quote Backend package.

The application instance lives in ``src.quote_api.main``; the in-memory
store in ``src.quote_api.repositories``.
"""
