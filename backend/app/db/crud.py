import logging
from typing import Any, List
from sqlmodel import select
from .models import Entry
from sqlmodel import Session

logger = logging.getLogger(__name__)


class EntryNotFound(LookupError):
    def __init__(self, entry_id: int):
        super().__init__(f"Entry {entry_id} does not exist")
        self.entry_id = entry_id


def _commit(session: Session) -> None:
    try:
        session.commit()
    except Exception:
        session.rollback()
        raise


def create_entry(session: Session, entry: Entry) -> Entry:
    session.add(entry)
    _commit(session)
    session.refresh(entry)
    logger.info("Created entry %s", entry.id)
    return entry

def list_entries(session: Session) -> List[Entry]:
    return session.exec(select(Entry)).all()

def get_entry(session: Session, entry_id: int) -> Entry:
    entry = session.get(Entry, entry_id)
    if entry is None:
        raise EntryNotFound(entry_id)
    return entry

def update_entry(session: Session, entry_id: int, changes: dict[str, Any]) -> Entry:
    """Apply ``changes`` to the stored entry; fields not present are left alone."""
    entry = get_entry(session, entry_id)
    for field, value in changes.items():
        setattr(entry, field, value)
    session.add(entry)
    _commit(session)
    session.refresh(entry)
    logger.info("Updated entry %s fields=%s", entry_id, sorted(changes))
    return entry

def delete_entry(session: Session, entry_id: int) -> None:
    entry = get_entry(session, entry_id)
    session.delete(entry)
    _commit(session)
    logger.info("Deleted entry %s", entry_id)
