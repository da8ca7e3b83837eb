from __future__ import annotations

import itertools
import logging
from typing import Dict, List

from gradecalc.domain.models.entities import RawNumber, SubjectEntry

logger = logging.getLogger(__name__)


class EntryNotFoundError(KeyError):
    pass


class EntryStore:
    """In-memory, insertion-ordered collection of subject entries.

    Handles are plain ints handed out by a counter and never reused, so a
    removed handle can't come back and point at someone else's row.
    """

    def __init__(self) -> None:
        self._entries: Dict[int, SubjectEntry] = {}
        self._ids = itertools.count(1)

    def add(self, name: str = "", mark: RawNumber = "", out_of: RawNumber = "") -> int:
        handle = next(self._ids)
        self._entries[handle] = SubjectEntry(name=name, mark=mark, out_of=out_of)
        logger.debug("Added entry %d", handle)
        return handle

    def remove(self, handle: int) -> None:
        try:
            del self._entries[handle]
        except KeyError as exc:
            raise EntryNotFoundError(handle) from exc
        logger.debug("Removed entry %d", handle)

    def get(self, handle: int) -> SubjectEntry:
        try:
            return self._entries[handle]
        except KeyError as exc:
            raise EntryNotFoundError(handle) from exc

    def list(self) -> List[int]:
        return list(self._entries)

    def entries(self) -> List[SubjectEntry]:
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, handle: object) -> bool:
        return handle in self._entries
