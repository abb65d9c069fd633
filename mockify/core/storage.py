"""Persist and load collections as whole JSON documents."""
import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

from mockify.core.errors import StorageError

logger = logging.getLogger(__name__)

Record = dict


def _clean(name: str, data) -> List[Record]:
    """Keep only objects carrying an integer id."""
    if not isinstance(data, list):
        logger.warning("Collection %s: document is not a list, treating as empty", name)
        return []
    out = []
    for item in data:
        if not isinstance(item, dict):
            logger.warning("Collection %s: skipping non-object item", name)
            continue
        record_id = item.get("id")
        if not isinstance(record_id, int) or isinstance(record_id, bool):
            logger.warning("Collection %s: skipping item without integer id", name)
            continue
        out.append(item)
    return out


class JsonFileAdapter:
    """One document per collection at <data_dir>/<name>.json."""

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = Path(data_dir)

    def path(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"

    def load(self, name: str) -> List[Record]:
        """Load a collection from disk. Missing or unreadable documents load as empty."""
        p = self.path(name)
        if not p.exists():
            return []
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning("Collection %s: unreadable document %s (%s)", name, p, e)
            return []
        return _clean(name, data)

    def save(self, name: str, records: List[Record]) -> None:
        """Overwrite a collection document. Written to a temp file, then renamed into place."""
        p = self.path(name)
        try:
            payload = json.dumps(records, indent=2, ensure_ascii=False)
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(prefix=f".{name}.", suffix=".tmp", dir=self.data_dir)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp, p)
            except BaseException:
                if os.path.exists(tmp):
                    os.unlink(tmp)
                raise
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(f"Could not write collection {name!r} to {p}: {e}") from e


class MemoryAdapter:
    """In-memory stand-in for JsonFileAdapter (tests, throwaway runs)."""

    def __init__(self, initial: Optional[Dict[str, List[Record]]] = None) -> None:
        self._documents: Dict[str, List[Record]] = {}
        for name, records in (initial or {}).items():
            self.save(name, records)

    def load(self, name: str) -> List[Record]:
        return _clean(name, copy.deepcopy(self._documents.get(name, [])))

    def save(self, name: str, records: List[Record]) -> None:
        self._documents[name] = copy.deepcopy(list(records))
