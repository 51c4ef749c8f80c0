"""
Form state for the task and profile dialogs
"""

from datetime import date
from typing import Optional, Union
from pydantic import ValidationError as ModelValidationError
from taskboard.config.constants import TASK_DEFAULT_STATUS, TASK_DEFAULT_PRIORITY
from taskboard.models.profile import Profile, ProfilePatch
from taskboard.models.session import SessionContext
from taskboard.models.task import Task, TaskDraft, TaskPatch
from taskboard.services.profile_manager import ProfileManager
from taskboard.services.task_list import TaskListManager
from taskboard.utils.error_handler import ValidationError


def _due_date_or_none(value: Optional[Union[str, date]]) -> Optional[Union[str, date]]:
    """Empty due date input means "no due date" """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


class TaskForm:
    """Edit buffer behind the create/edit task dialog"""
    
    FIELDS = ("title", "description", "status", "priority", "due_date")
    
    def __init__(self):
        self.is_open = False
        self.editing_task_id: Optional[str] = None
        self.reset()
    
    def reset(self):
        """Reset buffer to defaults"""
        self.title = ""
        self.description = ""
        self.status = TASK_DEFAULT_STATUS
        self.priority = TASK_DEFAULT_PRIORITY
        self.due_date = ""
    
    def open_for_create(self):
        self.editing_task_id = None
        self.reset()
        self.is_open = True
    
    def open_for_edit(self, task: Task):
        """Seed buffer from an existing task"""
        self.editing_task_id = task.id
        self.title = task.title
        self.description = task.description
        self.status = task.status
        self.priority = task.priority
        self.due_date = task.due_date.isoformat() if task.due_date else ""
        self.is_open = True
    
    def set(self, **fields):
        """Echo user input into the buffer"""
        for name, value in fields.items():
            if name not in self.FIELDS:
                raise AttributeError(f"Unknown task form field: {name}")
            setattr(self, name, value)
    
    def close(self):
        self.is_open = False
    
    def values(self) -> dict:
        return {name: getattr(self, name) for name in self.FIELDS}
    
    async def submit(self, session: SessionContext, task_list: TaskListManager) -> bool:
        """
        Hand the buffer to the task list (create or update)
        
        A blank title silently suppresses submission.
        
        Args:
            session: Session context
            task_list: Task list manager
            
        Returns:
            True if the remote call succeeded
        """
        if not self.title or not self.title.strip():
            return False
        
        fields = self.values()
        fields["due_date"] = _due_date_or_none(fields["due_date"])
        
        try:
            if self.editing_task_id is None:
                request = TaskDraft(user_id=session.user_id, **fields)
            else:
                request = TaskPatch(**fields)
        except ModelValidationError as e:
            raise ValidationError(f"Invalid task form: {e}") from e
        
        if self.editing_task_id is None:
            ok = await task_list.create(session, request)
        else:
            ok = await task_list.update(session, self.editing_task_id, request)
        
        if ok:
            self.editing_task_id = None
            self.reset()
            self.close()
        return ok


class ProfileForm:
    """Edit buffer behind the profile dialog"""
    
    FIELDS = ("first_name", "last_name", "email")
    
    def __init__(self):
        self.is_open = False
        self.first_name = ""
        self.last_name = ""
        self.email = ""
    
    def seed(self, profile: Optional[Profile]):
        """Copy profile values into the buffer"""
        if profile is None:
            return
        self.first_name = profile.first_name or ""
        self.last_name = profile.last_name or ""
        self.email = profile.email or ""
    
    def open(self):
        self.is_open = True
    
    def set(self, **fields):
        for name, value in fields.items():
            if name not in self.FIELDS:
                raise AttributeError(f"Unknown profile form field: {name}")
            setattr(self, name, value)
    
    def close(self):
        self.is_open = False
    
    async def submit(self, session: SessionContext, profiles: ProfileManager) -> bool:
        """
        Send buffer to the profile manager
        
        Returns:
            True if the remote call succeeded
        """
        patch = ProfilePatch(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
        )
        ok = await profiles.update(session, patch)
        if ok:
            self.seed(profiles.profile)
            self.close()
        return ok
