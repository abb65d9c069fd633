"""Shared application state (injected into routes)."""
from typing import Dict, Optional

from mockify.config import DATA_DIR
from mockify.core.record_store import Adapter, ResourceStore
from mockify.core.storage import JsonFileAdapter
from mockify.models import PLAYLISTS, TRACKS


class AppState:
    def __init__(self, adapter: Optional[Adapter] = None) -> None:
        self.adapter = adapter if adapter is not None else JsonFileAdapter(DATA_DIR)
        self._stores: Dict[str, ResourceStore] = {
            schema.name: ResourceStore(schema, self.adapter) for schema in (TRACKS, PLAYLISTS)
        }

    def store(self, name: str) -> ResourceStore:
        return self._stores[name]


_state = AppState()


def get_state() -> AppState:
    return _state
