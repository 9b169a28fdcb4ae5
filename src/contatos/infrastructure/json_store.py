"""JSON file implementation of ContactStore.
The file holds one JSON array of {"fullName", "phoneNumber"} objects and is
rewritten in full on every save.
"""

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from contatos.domain import Contact

logger = logging.getLogger(__name__)

EMPTY_SNAPSHOT = "[]"


class JsonContactStore:
    """Stores the contact list as a pretty-printed JSON array at path.
    The parent directory and an empty [] file are created on first use.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._initialize_file()

    @property
    def path(self) -> Path:
        return self._path

    def _initialize_file(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if not self._path.exists():
                self._path.write_text(EMPTY_SNAPSHOT, encoding="utf-8")
                logger.info("Created contact store at %s", self._path)
        except OSError:
            logger.exception("Could not initialize contact store at %s", self._path)

    def load(self) -> list[Contact]:
        try:
            if not self._path.exists():
                return []
            data = json.loads(self._path.read_text(encoding="utf-8"))
            if not isinstance(data, list):
                raise ValueError("Contact store must hold a JSON array.")
            contacts = [Contact.from_dict(item) for item in data]
        except (OSError, ValueError, RecursionError):
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors;
            # RecursionError comes from deeply nested arrays.
            logger.exception("Could not load contacts from %s", self._path)
            return []
        logger.debug("Read %d contacts from %s", len(contacts), self._path)
        return contacts

    def save(self, contacts: Sequence[Contact]) -> None:
        payload = [c.to_dict() for c in contacts]
        try:
            # Encode before opening so an unencodable snapshot leaves the file intact.
            data = json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")
            self._path.write_bytes(data)
        except (OSError, ValueError):
            logger.exception("Could not save contacts to %s", self._path)
            return
        logger.debug("Wrote %d contacts to %s", len(payload), self._path)
