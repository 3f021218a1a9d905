import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from whitelist_admin.core.errors import (Conflict, InternalStorageError,
                                         NotFound)
from whitelist_admin.core.time import utc_now
from whitelist_admin.models import WhitelistEntry

logger = logging.getLogger(__name__)

DUPLICATE_PAGE_MESSAGE = "Page ID already exists in whitelist"


def _find_by_page_id(db: Session, page_id: str) -> list[WhitelistEntry]:
    return list(
        db.execute(
            select(WhitelistEntry).where(WhitelistEntry.page_id == page_id)
        ).scalars().all()
    )


def list_entries(db: Session) -> list[WhitelistEntry]:
    try:
        entries = list(db.execute(select(WhitelistEntry)).scalars().all())
    except SQLAlchemyError:
        logger.exception("Failed to fetch whitelist")
        raise InternalStorageError("Failed to fetch whitelist")
    logger.info("Retrieved whitelist entries", extra={"count": len(entries)})
    return entries


def add_entry(
    db: Session, page_id: str, merchant_name: str
) -> WhitelistEntry:
    try:
        if _find_by_page_id(db, page_id):
            raise Conflict(DUPLICATE_PAGE_MESSAGE)

        now = utc_now()
        entry = WhitelistEntry(
            id=str(uuid.uuid4()),
            page_id=page_id,
            merchant_name=merchant_name,
            created_at=now,
            updated_at=now,
        )
        db.add(entry)
        db.commit()
    except IntegrityError:
        # Lost the race against a concurrent add of the same page.
        db.rollback()
        raise Conflict(DUPLICATE_PAGE_MESSAGE)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to add to whitelist")
        raise InternalStorageError("Failed to add to whitelist")

    logger.info(
        "Added new merchant to whitelist",
        extra={"merchant_name": merchant_name, "page_id": page_id},
    )
    return entry


def remove_entry(db: Session, entry_id: str) -> None:
    try:
        entry = db.get(WhitelistEntry, entry_id)
        if entry is None:
            raise NotFound("Whitelist entry not found")
        merchant_name, page_id = entry.merchant_name, entry.page_id
        db.delete(entry)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to remove from whitelist")
        raise InternalStorageError("Failed to remove from whitelist")

    logger.info(
        "Removed merchant from whitelist",
        extra={"merchant_name": merchant_name, "page_id": page_id},
    )


def is_whitelisted(db: Session, page_id: str) -> bool:
    try:
        return bool(_find_by_page_id(db, page_id))
    except SQLAlchemyError:
        logger.exception("Failed to check whitelist")
        raise InternalStorageError("Failed to check whitelist")
