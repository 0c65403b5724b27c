# backend/sportclass/routes/v1/__init__.py
"""
API v1 Routes

Versioned API endpoints under /api/v1.
"""

from . import contents, lessons, sports, teachers

__all__ = [
    "contents",
    "lessons",
    "sports",
    "teachers",
]
