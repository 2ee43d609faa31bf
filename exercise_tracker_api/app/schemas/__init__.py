"""
Pydantic schema definitions for API payloads.

Each domain (users, exercises) defines its own Pydantic models for
request and response bodies.  Schemas are separated from the stored
JSON records to decouple API representation from persistence.
"""
