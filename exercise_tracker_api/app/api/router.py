"""
Top-level API router.

Aggregates the domain routers under the ``/api`` prefix applied in
``main.py``.  Both routers share the ``/users`` prefix because
exercises and logs are addressed through their owner.
"""

from fastapi import APIRouter

from .endpoints import exercises, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(exercises.router, prefix="/users", tags=["exercises"])
