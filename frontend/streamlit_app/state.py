import logging
from typing import Any, Optional

from .api import EntryClient, encode_entry

logger = logging.getLogger(__name__)


class EntryStore:
    """Entries shared by every view of one browser session.

    Each action goes to the API first; the local list is only touched once
    the call succeeded, so a failed request leaves it as it was.
    """

    def __init__(self, client: EntryClient):
        self.client = client
        self.entries: list[dict] = []

    def refresh(self) -> list[dict]:
        self.entries = self.client.list_entries()
        return self.entries

    def find(self, entry_id: int) -> Optional[dict]:
        for entry in self.entries:
            if entry.get("id") == entry_id:
                return entry
        return None

    def create_entry(self, fields: dict[str, Any]) -> dict:
        created = self.client.create_entry(fields)
        self.entries.append(created)
        logger.debug("Added entry %s to store", created.get("id"))
        return created

    def update_entry(self, entry_id: int, changes: dict[str, Any]) -> str:
        msg = self.client.update_entry(entry_id, changes)
        entry = self.find(entry_id)
        if entry is not None:
            entry.update(encode_entry(changes))
        return msg

    def delete_entry(self, entry_id: int) -> str:
        msg = self.client.delete_entry(entry_id)
        self.entries = [e for e in self.entries if e.get("id") != entry_id]
        return msg
