"""
Pydantic models for user data.

``UserRead`` mirrors a stored user record.  ``UserUpdate`` describes a
partial update: only the fields present in the request body are
applied, and a supplied ``location`` replaces the stored one as a
whole.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class Coordinates(BaseModel):
    latitude: float = Field(..., examples=[40.7128])
    longitude: float = Field(..., examples=[-74.006])


class UserLocation(BaseModel):
    city: Optional[str] = Field(None, examples=["New York"])
    country: Optional[str] = Field(None, examples=["US"])
    coordinates: Optional[Coordinates] = None


class UserProfile(BaseModel):
    name: Optional[str] = Field(None, examples=["Sarah Johnson"])
    username: Optional[str] = Field(None, examples=["sarah_j"])
    email: Optional[str] = Field(None, examples=["sarah@example.com"])
    phone: Optional[str] = Field(None, examples=["+1-555-123-4567"])
    dob: Optional[str] = Field(None, examples=["1995-06-15"])
    location: Optional[UserLocation] = None
    is_active: Optional[bool] = Field(None, alias="isActive")
    is_verified: Optional[bool] = Field(None, alias="isVerified")
    bio: Optional[str] = None
    images: Optional[List[str]] = None
    interests: Optional[List[str]] = Field(None, examples=[["Hiking", "Travel"]])
    occupation: Optional[str] = None
    education: Optional[str] = None
    height: Optional[str] = None
    herefor: Optional[str] = Field(None, examples=["Long-term relationship"])
    relationship: Optional[str] = None
    children: Optional[str] = None
    drinking: Optional[str] = None
    smoking: Optional[str] = None
    language: Optional[List[str]] = None
    religion: Optional[str] = None
    date: Optional[str] = None

    model_config = {
        "populate_by_name": True,
    }


class UserUpdate(UserProfile):
    """Schema for a partial user update.

    Unknown fields are rejected so a typo cannot silently add a new
    attribute to the stored record.  The two account flags may be
    omitted but never set to null.
    """

    model_config = {
        "populate_by_name": True,
        "extra": "forbid",
    }

    @field_validator("is_active", "is_verified")
    @classmethod
    def flag_not_null(cls, value):
        if value is None:
            raise ValueError("must be true or false")
        return value


class UserRead(UserProfile):
    """Schema for reading a user from the API."""

    id: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
