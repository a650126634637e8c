"""
Pydantic request/response schemas for the HTTP API.
"""

from .todos import StoryCreate, TaskCreate, Story, Task, StoryList, TaskList

__all__ = [
    "StoryCreate",
    "TaskCreate",
    "Story",
    "Task",
    "StoryList",
    "TaskList",
]
