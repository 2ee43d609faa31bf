"""
Pydantic models for user data.

Users carry nothing but a free-text ``username`` and the opaque ``id``
assigned on creation.  Usernames are not required to be unique.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering a user."""

    username: str = Field(..., examples=["alice"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    username: str
    id: str

    model_config = {
        "from_attributes": True,
    }
