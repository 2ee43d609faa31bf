"""
Application package initializer.

The application is organised into configuration and persistence
(``core``), request/response models (``schemas``), business logic
(``services``) and HTTP routes (``api``).  ``main`` ties them together.
"""

from .main import app  # noqa: F401
