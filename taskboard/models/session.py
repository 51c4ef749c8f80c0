"""
Session context model
"""

from pydantic import BaseModel, ConfigDict


class SessionContext(BaseModel):
    """Authenticated user identity passed explicitly to every remote call"""
    
    model_config = ConfigDict(frozen=True)
    
    user_id: str
    access_token: str
