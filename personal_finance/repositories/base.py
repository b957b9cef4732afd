"""
Generic SQLAlchemy repository.

A repository is the persistence collaborator the services talk to.
It never commits on its own: writes are flushed so ids are assigned,
and the surrounding transaction() scope decides whether they stick.
"""

from contextlib import contextmanager
from typing import Any, Generic, Iterator, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.orm import Session

from personal_finance.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class SQLAlchemyRepository(Generic[ModelT]):
    """Save/delete/find operations over a single mapped model."""

    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Scoped transaction: commit on success, roll back on any error.

        The exception is re-raised after the rollback, so callers
        still see the original failure.
        """
        try:
            yield self.db
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def save(self, entity: ModelT) -> ModelT:
        """
        Insert a new entity or overwrite an existing one.

        An entity without an id is inserted and gets its id assigned
        on flush. An entity with an id is merged onto the stored row,
        which also works for detached or freshly built instances.
        """
        if entity.id is None:
            self.db.add(entity)
        else:
            entity = self.db.merge(entity)
        self.db.flush()
        return entity

    def delete(self, entity: ModelT) -> None:
        """Delete the stored row with the entity's id. Unknown ids are a no-op."""
        stored = self.db.get(self.model, entity.id)
        if stored is not None:
            self.db.delete(stored)
            self.db.flush()

    def find_by_id(self, entity_id: int) -> ModelT | None:
        return self.db.get(self.model, entity_id)

    def find_all_by_example(self, example: ModelT) -> list[ModelT]:
        """Return every stored entity matching the example, ordered by id."""
        entities = self.db.execute(
            select(self.model)
            .where(*self.build_example_filters(example))
            .order_by(self.model.id)
        ).scalars().all()
        return list(entities)

    def build_example_filters(self, example: ModelT) -> list[Any]:
        """
        Turn a partially filled entity into equality predicates.

        Every mapped column holding a non-None value on the example
        becomes `column == value`; None columns are wildcards. The
        predicates are combined with AND by the caller's where().
        """
        filters = []
        for attr in inspect(self.model).column_attrs:
            value = getattr(example, attr.key)
            if value is not None:
                filters.append(getattr(self.model, attr.key) == value)
        return filters
