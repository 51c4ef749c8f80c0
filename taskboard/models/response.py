"""
Notification and statistics models
"""

import uuid
from typing import Optional
from pydantic import BaseModel, Field


class Notification(BaseModel):
    """One-shot dismissible user-visible message"""
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    title: str
    description: Optional[str] = None
    variant: str = "default"  # default | destructive


class TaskStats(BaseModel):
    """Task counters shown on the dashboard cards"""
    total: int = 0
    completed: int = 0
    pending: int = 0
    in_progress: int = 0
