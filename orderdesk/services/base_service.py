"""Shared service base with scoped transaction handling."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from orderdesk.core.exceptions import ReferencedEntityNotFoundError
from orderdesk.database.db import SessionLocal

logger = logging.getLogger(__name__)


class BaseService:
    """Base class for services that operate on a SQLAlchemy session."""

    def __init__(self, db: Session | None = None) -> None:
        self.db = db or SessionLocal()

    @contextmanager
    def atomic(self) -> Generator[Session, None, None]:
        """Run a unit of work: commit on success, roll back everything on error.

        Integrity failures (dangling foreign keys) surface as
        ``ReferencedEntityNotFoundError`` instead of a raw storage error.
        """
        try:
            yield self.db
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning(
                "transaction.rolled_back",
                extra={"event": "transaction.rolled_back", "reason": "integrity_error"},
            )
            raise ReferencedEntityNotFoundError("Referenced entity not found") from exc
        except Exception:
            self.db.rollback()
            logger.info("transaction.rolled_back", extra={"event": "transaction.rolled_back"})
            raise
