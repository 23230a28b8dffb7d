"""
API integration module.

FastAPI dependency factories used by route handlers to obtain services.
"""
