"""
Application constants
"""

# Backend REST API
REST_PATH = "/rest/v1"
AUTH_PATH = "/auth/v1"
TASKS_TABLE = "tasks"
PROFILES_TABLE = "profiles"
TASKS_ORDER = "created_at.desc"

# Filters
FILTER_ALL = "all"

# Task form defaults
TASK_DEFAULT_STATUS = "pending"
TASK_DEFAULT_PRIORITY = "medium"

# Select options (value, label)
STATUS_CHOICES = [("pending", "Pending"), ("in_progress", "In Progress"), ("completed", "Completed")]
PRIORITY_CHOICES = [("low", "Low"), ("medium", "Medium"), ("high", "High")]

# Profile placeholder shown until a profile with a first name is loaded
PROFILE_PLACEHOLDER = "Profile"

# Empty states
EMPTY_NO_TASKS = "No tasks yet. Create your first task!"
EMPTY_NO_MATCHES = "No tasks match your filters."

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "taskboard.log"

# Display
DISPLAY_DATE_FORMAT = "%b %d, %Y"  # e.g. "Mar 05, 2025"
