"""
User Schemas.

Pydantic schemas for the user endpoints (login and creation).
"""

from pydantic import BaseModel, ConfigDict, Field


class CredentialsRequest(BaseModel):
    """Request body for POST /users and POST /users/login."""

    email: str = Field(description="Email the operator typed, sent unvalidated")


class UserIdentity(BaseModel):
    """
    The user a session acts as.

    Produced only by a successful login or creation response and frozen
    afterwards. An empty user_id is the "unset" sentinel, so the backend
    must return a non-empty one for decoding to succeed.
    """

    user_id: str = Field(alias="userId", min_length=1, description="Backend user identifier")
    email: str = Field(description="Email the identity is registered under")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")
