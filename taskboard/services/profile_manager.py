"""
Profile service
"""

from typing import Optional
from taskboard.api.backend_client import BackendClient
from taskboard.config.constants import PROFILE_PLACEHOLDER
from taskboard.models.profile import Profile, ProfilePatch
from taskboard.models.session import SessionContext
from taskboard.services.notifier import Notifier
from taskboard.utils.logger import logger


class ProfileManager:
    """Holds the session user's profile"""
    
    def __init__(self, client: BackendClient, notifier: Notifier):
        """
        Initialize profile manager
        
        Args:
            client: Backend client
            notifier: User-visible notification channel
        """
        self.client = client
        self.notifier = notifier
        self.logger = logger
        self.profile: Optional[Profile] = None
    
    async def load(self, session: SessionContext) -> Optional[Profile]:
        """
        Load profile; failures are logged only and keep the previous value
        
        Args:
            session: Session context
            
        Returns:
            Current profile or None
        """
        try:
            self.profile = await self.client.get_profile(session)
        except Exception as e:
            self.logger.error(f"Error loading profile: {e}")
        return self.profile
    
    async def update(self, session: SessionContext, patch: ProfilePatch) -> bool:
        """
        Update profile, then reload it
        
        Args:
            session: Session context
            patch: Fields to change
            
        Returns:
            True on success
        """
        try:
            await self.client.update_profile(session, patch)
        except Exception as e:
            self.notifier.error("Error updating profile", e)
            return False
        
        self.notifier.success("Profile updated", "Your profile has been updated successfully.")
        await self.load(session)
        return True
    
    @property
    def display_name(self) -> str:
        """Full name, or a placeholder until a first name is known"""
        if self.profile and self.profile.first_name:
            return f"{self.profile.first_name} {self.profile.last_name}"
        return PROFILE_PLACEHOLDER
