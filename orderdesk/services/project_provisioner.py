"""Idempotent project creation for confirmed sales order lines."""

from __future__ import annotations

import logging
import random

from sqlalchemy.orm import Session

from orderdesk.models import Project
from orderdesk.utils.ids import new_id

logger = logging.getLogger(__name__)

PROJECT_COLORS = (
    "#3b82f6",
    "#10b981",
    "#8b5cf6",
    "#f59e0b",
    "#ef4444",
    "#06b6d4",
    "#ec4899",
    "#84cc16",
    "#6366f1",
    "#f97316",
)


def project_name(client_name: str, product_name: str, year: int) -> str:
    return f"{client_name}_{product_name}_{year}"


class ProjectStore:
    """Project persistence used by provisioning; never commits."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_name_and_client(self, name: str, client_id: str) -> Project | None:
        return (
            self.db.query(Project)
            .filter(Project.name == name, Project.client_id == client_id)
            .first()
        )

    def create(self, name: str, client_id: str, color: str, description: str | None) -> Project:
        project = Project(
            id=new_id(),
            name=name,
            client_id=client_id,
            color=color,
            description=description,
            is_disabled=False,
        )
        self.db.add(project)
        self.db.flush()
        return project


class ProjectProvisioner:
    def __init__(self, store: ProjectStore, rng: random.Random | None = None) -> None:
        self.store = store
        self.rng = rng or random.Random()

    def ensure_project(
        self,
        client_id: str,
        client_name: str,
        product_name: str,
        year: int,
        note: str | None = None,
    ) -> tuple[Project, bool]:
        """Return the project for this client/product/year, creating it when absent."""
        name = project_name(client_name, product_name, year)
        existing = self.store.find_by_name_and_client(name, client_id)
        if existing is not None:
            return existing, False

        project = self.store.create(
            name=name,
            client_id=client_id,
            color=self.rng.choice(PROJECT_COLORS),
            description=note or None,
        )
        logger.info(
            "project.provisioned",
            extra={"event": "project.provisioned", "project_id": project.id, "project_name": name},
        )
        return project, True
