"""Display-name lookups for clients and products."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from orderdesk.models import Client, Product
from orderdesk.services.base_service import BaseService

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "Unknown client"
UNKNOWN_PRODUCT = "Unknown product"


class LookupService(BaseService):
    """Resolves names for display; a failed lookup falls back to a label."""

    def client_name(self, client_id: str | None) -> str:
        return self._name(Client, client_id, UNKNOWN_CLIENT)

    def product_name(self, product_id: str | None) -> str:
        return self._name(Product, product_id, UNKNOWN_PRODUCT)

    def _name(self, model, entity_id: str | None, fallback: str) -> str:
        if not entity_id:
            return fallback
        try:
            row = self.db.get(model, entity_id)
        except SQLAlchemyError:
            logger.warning(
                "lookup.failed",
                extra={"event": "lookup.failed", "entity": model.__tablename__, "entity_id": entity_id},
                exc_info=True,
            )
            return fallback
        if row is None:
            return fallback
        return row.name
