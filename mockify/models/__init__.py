"""Resource schemas for tracks and playlists."""
from mockify.models.playlist import PLAYLISTS, PlaylistFields
from mockify.models.track import TRACKS, TrackFields

__all__ = [
    "PLAYLISTS",
    "PlaylistFields",
    "TRACKS",
    "TrackFields",
]
