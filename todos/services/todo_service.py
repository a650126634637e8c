"""
Todo service: validates caller input and applies business rules on top of
the repository.

This is the only surface the presentation layer calls. Mutations that touch
no rows are reported as NotFoundError here; the repository itself only
reports counts.
"""

import logging
from typing import List

from todos.db.repositories import TodoRepository
from todos.domain.entities import Status, Story, Task
from todos.errors import NotFoundError
from todos.utils.validation import non_empty, validate_identifier

logger = logging.getLogger(__name__)


class TodoService:
    """Service class for story and task operations."""

    def __init__(self, repo: TodoRepository):
        self.repo = repo

    def create_story(self, name: str, owner: str) -> Story:
        """Validate input name and owner then create a new story."""
        logger.debug("Service.create_story: %s, %s", name, owner)
        name = non_empty(name, "name")
        owner = non_empty(owner, "owner")
        return self.repo.insert_story(name, owner)

    def get_stories(self, owner: str) -> List[Story]:
        logger.debug("Service.get_stories: %s", owner)
        return self.repo.select_stories(non_empty(owner, "owner"))

    def create_task(self, story_id: str, name: str) -> Task:
        logger.debug("Service.create_task: %s, %s", story_id, name)
        story_uuid = validate_identifier(story_id)
        name = non_empty(name, "name")
        return self.repo.insert_task(story_uuid, name)

    def get_task(self, task_id: str) -> Task:
        logger.debug("Service.get_task: %s", task_id)
        return self.repo.get_task(validate_identifier(task_id))

    def get_tasks(self, story_id: str) -> List[Task]:
        logger.debug("Service.get_tasks: %s", story_id)
        return self.repo.select_tasks(validate_identifier(story_id))

    def complete_task(self, task_id: str) -> None:
        """Mark a task as complete.

        Completing an already complete task succeeds; completing a deleted
        or unknown task raises NotFoundError.
        """
        logger.debug("Service.complete_task: %s", task_id)
        rows_affected = self.repo.update_task_status(validate_identifier(task_id), Status.COMPLETE)
        if rows_affected == 0:
            raise NotFoundError(f"unable to complete task: {task_id}")

    def delete_story(self, story_id: str) -> None:
        """Soft-delete a story together with its tasks."""
        logger.debug("Service.delete_story: %s", story_id)
        rows_affected = self.repo.delete_story(validate_identifier(story_id))
        if rows_affected == 0:
            raise NotFoundError(f"unable to delete story: {story_id}")

    def delete_task(self, task_id: str) -> None:
        logger.debug("Service.delete_task: %s", task_id)
        rows_affected = self.repo.delete_task(validate_identifier(task_id))
        if rows_affected == 0:
            raise NotFoundError(f"unable to delete task: {task_id}")
