"""
Middleware Module
CORS and error handling installed on the FastAPI application.
"""
