"""Pytest configuration: app wired to an in-memory adapter with a few seed records."""

import copy

import pytest
from fastapi.testclient import TestClient

from mockify.api.app import app
from mockify.api.state import AppState, get_state
from mockify.core.storage import MemoryAdapter

SEED_TRACKS = [
    {
        "id": 1,
        "naam": "Strobe",
        "bpm": 128,
        "duur": 634,
        "jaar": 2009,
        "artiesten": ["deadmau5"],
        "genres": ["Progressive House"],
        "spotify_url": "",
    },
    {
        "id": 2,
        "naam": "alors on danse",
        "bpm": 120,
        "duur": 206,
        "jaar": 2010,
        "artiesten": ["Stromae"],
        "genres": ["Eurodance", "Hip Hop"],
        "spotify_url": "",
    },
    {
        "id": 5,
        "naam": "Éclat",
        "bpm": 90,
        "duur": 240,
        "jaar": 2010,
        "artiesten": ["Stromae", "Angèle"],
        "genres": ["Pop"],
        "spotify_url": "https://open.spotify.com/track/abc",
    },
]

SEED_PLAYLISTS = [
    {
        "id": 1,
        "naam": "Zomerhits",
        "beschrijving": "Zon en zee",
        "author": "Anna",
        "visibility": "public",
        "spotify_url": "",
    },
    {
        "id": 2,
        "naam": "focus",
        "beschrijving": "Werken",
        "author": "Bram",
        "visibility": "private",
        "spotify_url": "",
    },
]


@pytest.fixture
def adapter():
    return MemoryAdapter(
        {"tracks": copy.deepcopy(SEED_TRACKS), "playlists": copy.deepcopy(SEED_PLAYLISTS)}
    )


@pytest.fixture
def state(adapter):
    return AppState(adapter)


@pytest.fixture
def client(state):
    app.dependency_overrides[get_state] = lambda: state
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
