"""
Core models, config parsing and config resolution for wtask.
"""

from wtask.core.models import Task, TaskTable
from wtask.core.loader import load_tasks

__all__ = [
    "Task",
    "TaskTable",
    "load_tasks",
]
