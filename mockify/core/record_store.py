"""Generic CRUD over one collection, loaded from and saved to a persistence adapter."""
import logging
import threading
from typing import Dict, List, Mapping, Optional, Protocol, Tuple

from mockify.core.errors import NotFoundError, ValidationError
from mockify.core.schema import ResourceSchema, parse_id, sort_key

logger = logging.getLogger(__name__)

Record = dict

_locks: Dict[str, threading.Lock] = {}
_locks_guard = threading.Lock()


def _collection_lock(name: str) -> threading.Lock:
    with _locks_guard:
        if name not in _locks:
            _locks[name] = threading.Lock()
        return _locks[name]


class Adapter(Protocol):
    def load(self, name: str) -> List[Record]: ...

    def save(self, name: str, records: List[Record]) -> None: ...


def next_id(records: List[Record]) -> int:
    """max(existing ids) + 1, or 1 for an empty collection."""
    return max((r["id"] for r in records), default=0) + 1


def find_index(records: List[Record], record_id: int) -> int:
    """Index of the record with this id, or -1."""
    for i, r in enumerate(records):
        if r.get("id") == record_id:
            return i
    return -1


class ResourceStore:
    """List/get/create/replace/patch/delete for the collection described by ``schema``.

    Every call reloads the collection; mutating calls save it in full. The
    load/save pair of a mutation runs under a per-collection lock since
    endpoints are served from a thread pool.
    """

    def __init__(self, schema: ResourceSchema, adapter: Adapter) -> None:
        self.schema = schema
        self.adapter = adapter
        self._lock = _collection_lock(schema.name)

    @property
    def name(self) -> str:
        return self.schema.name

    def _load(self) -> List[Record]:
        return self.adapter.load(self.name)

    def _save(self, records: List[Record]) -> None:
        self.adapter.save(self.name, records)

    def _locate(self, records: List[Record], record_id) -> Tuple[int, int]:
        rid = parse_id(record_id)
        idx = find_index(records, rid) if rid is not None else -1
        if idx == -1:
            raise NotFoundError(self.name, record_id)
        return idx, rid

    def list(
        self,
        filters: Optional[Mapping[str, str]] = None,
        sort: Optional[str] = None,
    ) -> Tuple[List[Record], int]:
        """Records matching every known filter, optionally sorted by the display field.

        Unknown filter params and empty values are ignored; ``sort`` other
        than "asc"/"desc" keeps insertion order.
        """
        records = self._load()
        for param, value in (filters or {}).items():
            f = self.schema.find_filter(param)
            if f is None or value in (None, ""):
                continue
            records = [r for r in records if f.matches(r, value)]
        if sort in ("asc", "desc"):
            field = self.schema.display_field
            records.sort(key=lambda r: sort_key(r.get(field)), reverse=(sort == "desc"))
        return records, len(records)

    def get(self, record_id) -> Record:
        records = self._load()
        idx, _ = self._locate(records, record_id)
        return records[idx]

    def create(self, fields: Mapping) -> Record:
        """Append a record with the next id and save. ``fields`` is already validated."""
        with self._lock:
            records = self._load()
            record = {"id": next_id(records), **{k: v for k, v in fields.items() if k != "id"}}
            records.append(record)
            self._save(records)
        logger.info("Created %s id %d", self.name, record["id"])
        return record

    def replace(self, record_id, fields: Mapping) -> Record:
        """Overwrite every field of an existing record. A body id must equal the path id."""
        with self._lock:
            records = self._load()
            idx, rid = self._locate(records, record_id)
            if "id" in fields and parse_id(fields["id"]) != rid:
                raise ValidationError('"id" must match the id in the path')
            record = {"id": rid, **{k: v for k, v in fields.items() if k != "id"}}
            records[idx] = record
            self._save(records)
        logger.info("Replaced %s id %d", self.name, rid)
        return record

    def patch(self, record_id, fields: Mapping) -> Record:
        """Merge supplied fields into an existing record; other fields are kept as stored."""
        with self._lock:
            records = self._load()
            idx, rid = self._locate(records, record_id)
            record = {**records[idx], **{k: v for k, v in fields.items() if k != "id"}}
            records[idx] = record
            self._save(records)
        logger.info("Patched %s id %d (%s)", self.name, rid, ", ".join(sorted(fields)) or "no fields")
        return record

    def delete(self, record_id) -> Record:
        """Remove a record and save. Returns the removed record."""
        with self._lock:
            records = self._load()
            idx, rid = self._locate(records, record_id)
            removed = records.pop(idx)
            self._save(records)
        logger.info("Deleted %s id %d", self.name, rid)
        return removed
