"""
API package.

Exposes ``router`` in ``router.py``, which includes the
domain-specific endpoint routers from ``endpoints``.
"""
