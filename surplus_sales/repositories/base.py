# surplus_sales/repositories/base.py

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from surplus_sales.core.config import settings
from surplus_sales.core.exceptions import ConflictError, InternalError, NotFoundError

logger = logging.getLogger("surplus_sales")


def normalize_image(image):
    # The default placeholder is never stored, only rendered
    if image is None or image in ("", "null", settings.DEFAULT_IMAGE_URL):
        return None
    return image


class BaseRepository:
    model = None
    label = "Record"

    def __init__(self, db: Session):
        self.db = db

    def get(self, record_id):
        record = self.db.get(self.model, record_id)
        if record is None:
            raise NotFoundError(f"{self.label} with ID {record_id} not found")
        return record

    def delete(self, record_id) -> None:
        record = self.get(record_id)
        self.db.delete(record)
        self._commit(f"delete {self.label.lower()} {record_id}")

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning(f"Integrity error trying to {action}: {exc.orig}")
            raise ConflictError(f"Unable to {action}: conflicting record") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Database error trying to {action}: {exc}")
            raise InternalError(f"Failed to {action}") from exc

    def _save(self, record, action: str):
        self.db.add(record)
        self._commit(action)
        self.db.refresh(record)
        return record
