"""
Profile model
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator


class Profile(BaseModel):
    """User profile; id equals the owning user's id"""
    
    model_config = ConfigDict(populate_by_name=True)
    
    id: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    
    @field_validator("first_name", "last_name", "email", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value


class ProfilePatch(BaseModel):
    """Profile update model"""
    
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
