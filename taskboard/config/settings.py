"""
Application settings and configuration
"""

import os
from pathlib import Path
from dotenv import load_dotenv
from typing import Optional

from taskboard.models.session import SessionContext

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def _optional_float(value: Optional[str]) -> Optional[float]:
    """Parse optional float env value (empty means None)"""
    if value is None or not value.strip():
        return None
    return float(value)


class Settings:
    """Application settings loaded from environment variables"""
    
    # Hosted backend
    BACKEND_URL: str = os.getenv("BACKEND_URL", "")
    BACKEND_API_KEY: str = os.getenv("BACKEND_API_KEY", "")
    
    # Authenticated user (sign-in happens outside this application)
    ACCESS_TOKEN: str = os.getenv("ACCESS_TOKEN", "")
    USER_ID: str = os.getenv("USER_ID", "")
    
    # Remote calls
    REQUEST_TIMEOUT: Optional[float] = _optional_float(os.getenv("REQUEST_TIMEOUT"))
    CHANGE_POLL_INTERVAL: float = float(os.getenv("CHANGE_POLL_INTERVAL", "2.0"))
    
    # Application
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", str(Path(__file__).parent.parent.parent / "logs"))
    WEB_PORT: int = int(os.getenv("WEB_PORT", "8000"))
    
    @classmethod
    def validate(cls) -> bool:
        """Validate that all required settings are present"""
        required = {
            "BACKEND_URL": cls.BACKEND_URL,
            "BACKEND_API_KEY": cls.BACKEND_API_KEY,
            "ACCESS_TOKEN": cls.ACCESS_TOKEN,
            "USER_ID": cls.USER_ID,
        }
        
        missing = [name for name, value in required.items() if not value]
        
        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}"
            )
        
        return True
    
    @classmethod
    def session(cls) -> SessionContext:
        """Build session context for the configured user"""
        return SessionContext(user_id=cls.USER_ID, access_token=cls.ACCESS_TOKEN)


# Global settings instance
settings = Settings()
