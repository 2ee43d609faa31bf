"""
Top-level package for the Exercise Tracker API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``exercise_tracker_api.app.main:app``.
"""

__all__ = []
