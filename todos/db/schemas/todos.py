from typing import List, Optional

from pydantic import BaseModel

from todos.domain import entities


class StoryCreate(BaseModel):
    # Missing or null fields fall through to validation as empty strings
    name: Optional[str] = ""
    owner: Optional[str] = ""


class TaskCreate(BaseModel):
    name: Optional[str] = ""


class Story(BaseModel):
    story_id: str
    name: str
    owner: str

    @classmethod
    def from_entity(cls, entity: entities.Story) -> "Story":
        return cls(story_id=str(entity.story_id), name=entity.name, owner=entity.owner)


class Task(BaseModel):
    task_id: str
    story_id: str
    name: str
    complete: bool

    @classmethod
    def from_entity(cls, entity: entities.Task) -> "Task":
        return cls(
            task_id=str(entity.task_id),
            story_id=str(entity.story_id),
            name=entity.name,
            complete=entity.complete,
        )


class StoryList(BaseModel):
    stories: List[Story]


class TaskList(BaseModel):
    tasks: List[Task]
