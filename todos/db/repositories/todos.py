"""
Story and task repository.

The only component that issues statements against the database. Rows are
mapped onto domain entities strictly: a row that does not decode cleanly is
reported as a store failure rather than patched up. Soft-deleted rows
(``deleted_at`` set) are excluded from every read and mutation.
"""
from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from typing import Iterator, List

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from todos.db import models
from todos.domain.entities import Status, Story, Task
from todos.errors import NotFoundError, StoreError

logger = logging.getLogger(__name__)


def _require(value, expected: type, column: str):
    if not isinstance(value, expected):
        raise StoreError(
            f"unable to decode column {column}: expected {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _to_story(row: models.Story) -> Story:
    return Story(
        story_id=_require(row.id, uuid.UUID, "id"),
        name=_require(row.name, str, "name"),
        owner=_require(row.owner, str, "owner"),
    )


def _to_task(row: models.Task) -> Task:
    raw_status = _require(row.status, str, "status")
    try:
        status = Status.from_string(raw_status)
    except ValueError as exc:
        raise StoreError(str(exc)) from exc
    return Task(
        task_id=_require(row.id, uuid.UUID, "id"),
        story_id=_require(row.story_id, uuid.UUID, "story_id"),
        name=_require(row.name, str, "name"),
        status=status,
    )


class TodoRepository:
    """Reads and writes stories and tasks through a shared engine."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = sessionmaker(
            bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
        )

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        """Yield a session; driver failures surface as StoreError."""
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            logger.error("Repo.%s failed: %s", operation, e)
            raise StoreError(f"{operation} failed: {e}") from e
        finally:
            db.close()

    def ping(self) -> None:
        """Round-trip a trivial query to prove the database is reachable."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1")).scalar_one()
        except SQLAlchemyError as e:
            raise StoreError(f"ping failed: {e}") from e

    def insert_story(self, name: str, owner: str) -> Story:
        logger.debug("Repo.insert_story: %s, %s", name, owner)
        with self._session("insert_story") as db:
            row = models.Story(name=name, owner=owner)
            db.add(row)
            db.commit()
            db.refresh(row)
            return _to_story(row)

    def select_stories(self, owner: str) -> List[Story]:
        """Active stories for ``owner``, oldest first."""
        logger.debug("Repo.select_stories: %s", owner)
        with self._session("select_stories") as db:
            rows = (
                db.query(models.Story)
                .filter(models.Story.owner == owner, models.Story.deleted_at.is_(None))
                .order_by(models.Story.created_at.asc())
                .all()
            )
            return [_to_story(row) for row in rows]

    def get_task(self, task_id: uuid.UUID) -> Task:
        logger.debug("Repo.get_task: %s", task_id)
        with self._session("get_task") as db:
            row = (
                db.query(models.Task)
                .filter(models.Task.id == task_id, models.Task.deleted_at.is_(None))
                .first()
            )
            if row is None:
                raise NotFoundError(f"task not found: {task_id}")
            return _to_task(row)

    def insert_task(self, story_id: uuid.UUID, name: str) -> Task:
        logger.debug("Repo.insert_task: %s, %s", story_id, name)
        with self._session("insert_task") as db:
            # status is left to the column's server default
            row = models.Task(story_id=story_id, name=name)
            db.add(row)
            db.commit()
            db.refresh(row)
            return _to_task(row)

    def select_tasks(self, story_id: uuid.UUID) -> List[Task]:
        """Active tasks for a story, oldest first."""
        logger.debug("Repo.select_tasks: story: %s", story_id)
        with self._session("select_tasks") as db:
            rows = (
                db.query(models.Task)
                .filter(models.Task.story_id == story_id, models.Task.deleted_at.is_(None))
                .order_by(models.Task.created_at.asc())
                .all()
            )
            return [_to_task(row) for row in rows]

    def update_task_status(self, task_id: uuid.UUID, status: Status) -> int:
        """Set the status of an active task; returns rows affected."""
        logger.debug("Repo.update_task_status: %s, %s", task_id, status)
        with self._session("update_task_status") as db:
            affected = (
                db.query(models.Task)
                .filter(models.Task.id == task_id, models.Task.deleted_at.is_(None))
                .update(
                    {
                        models.Task.status: status.to_string(),
                        models.Task.updated_at: models.now_utc(),
                    },
                    synchronize_session=False,
                )
            )
            db.commit()
            return affected

    def delete_story(self, story_id: uuid.UUID) -> int:
        """Soft-delete a story and all of its active tasks.

        Both updates run in one transaction; if either fails neither is
        applied. Returns the combined number of rows affected.
        """
        logger.debug("Repo.delete_story: %s", story_id)
        with self._session("delete_story") as db:
            with db.begin():
                now = models.now_utc()
                tasks_deleted = (
                    db.query(models.Task)
                    .filter(models.Task.story_id == story_id, models.Task.deleted_at.is_(None))
                    .update({models.Task.deleted_at: now}, synchronize_session=False)
                )
                story_deleted = (
                    db.query(models.Story)
                    .filter(models.Story.id == story_id, models.Story.deleted_at.is_(None))
                    .update({models.Story.deleted_at: now}, synchronize_session=False)
                )
            return tasks_deleted + story_deleted

    def delete_task(self, task_id: uuid.UUID) -> int:
        """Soft-delete an active task; returns 0 or 1."""
        logger.debug("Repo.delete_task: %s", task_id)
        with self._session("delete_task") as db:
            affected = (
                db.query(models.Task)
                .filter(models.Task.id == task_id, models.Task.deleted_at.is_(None))
                .update({models.Task.deleted_at: models.now_utc()}, synchronize_session=False)
            )
            db.commit()
            return affected
