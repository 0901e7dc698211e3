import json
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from ..core.config import settings
from ..core.logging import logger

# Guards read-modify-write sequences within this process only.
_mutation_lock = threading.Lock()


class JsonStore:
    """Event document and flat volunteer ledger, each kept in its own JSON file.

    Every write replaces the whole file. Nothing spans the two files, so a
    caller updating both issues two independent writes.
    """

    def __init__(
        self,
        data_dir: Union[str, Path],
        events_file: str = "events.json",
        volunteers_file: str = "volunteers.json",
    ):
        self.data_dir = Path(data_dir)
        self.events_path = self.data_dir / events_file
        self.volunteers_path = self.data_dir / volunteers_file

    def initialize(self, default_event: Dict[str, Any]) -> None:
        """Create the data directory and seed whichever files are absent."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

        if not self.events_path.exists():
            self._write_json(self.events_path, default_event)
            logger.info(f"Seeded event data at {self.events_path}")

        if not self.volunteers_path.exists():
            self._write_json(self.volunteers_path, [])
            logger.info(f"Created empty volunteer ledger at {self.volunteers_path}")

    def read_event(self) -> Optional[Dict[str, Any]]:
        try:
            with open(self.events_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading event data: {e}")
            return None

        if not isinstance(data, dict):
            logger.error(f"Event data in {self.events_path} is not an object")
            return None
        return data

    def write_event(self, event: Dict[str, Any]) -> bool:
        return self._write_json(self.events_path, event)

    def read_volunteers(self) -> List[Dict[str, Any]]:
        try:
            with open(self.volunteers_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading volunteers: {e}")
            return []

        if not isinstance(data, list):
            logger.error(f"Volunteer ledger in {self.volunteers_path} is not a list")
            return []
        return data

    def write_volunteers(self, volunteers: List[Dict[str, Any]]) -> bool:
        return self._write_json(self.volunteers_path, volunteers)

    @contextmanager
    def mutation(self) -> Iterator["JsonStore"]:
        """Hold the process-wide lock for a read-modify-write sequence."""
        with _mutation_lock:
            yield self

    def _write_json(self, path: Path, data: Any) -> bool:
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, path)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error writing {path.name}: {e}")
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False


def get_store() -> JsonStore:
    """Dependency returning the store configured in settings."""
    return JsonStore(settings.data_dir, settings.events_file, settings.volunteers_file)
