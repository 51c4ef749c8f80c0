"""
Task model
"""

from enum import Enum
from typing import Optional
from datetime import date, datetime
from pydantic import BaseModel, ConfigDict


class TaskStatus(str, Enum):
    """Task status"""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    """Task priority"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Task(BaseModel):
    """Task record as stored by the backend"""
    
    model_config = ConfigDict(populate_by_name=True, frozen=True, use_enum_values=True, validate_default=True)
    
    id: str
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    user_id: str


class TaskDraft(BaseModel):
    """Task creation model (no server-assigned fields)"""
    
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True, validate_default=True)
    
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[date] = None
    user_id: str


class TaskPatch(BaseModel):
    """Task partial update model; only explicitly set fields are sent"""
    
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)
    
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[date] = None
