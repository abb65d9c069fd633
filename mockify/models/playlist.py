"""Playlist resource: fields, list filters and sort field."""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from mockify.config import PLAYLISTS_COLLECTION
from mockify.core.schema import FieldFilter, ResourceSchema


class PlaylistFields(BaseModel):
    """Client-writable playlist fields, in validation order."""
    model_config = ConfigDict(extra="forbid", strict=True)

    naam: str = Field(min_length=1)
    beschrijving: str = Field(min_length=1)
    author: str = Field(min_length=1)
    visibility: Literal["public", "private"]
    spotify_url: str = ""


PLAYLISTS = ResourceSchema(
    name=PLAYLISTS_COLLECTION,
    fields=PlaylistFields,
    display_field="naam",
    filters=(
        FieldFilter("naam", "naam"),
        FieldFilter("author", "author"),
        FieldFilter("visibility", "visibility", "equals"),
    ),
)
