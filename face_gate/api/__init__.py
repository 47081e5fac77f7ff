"""
API layer for the face gate service.

Exposes the face comparison endpoint (POST /compare) and a health check.
"""
