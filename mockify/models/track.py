"""Track resource: fields, list filters and sort field."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from mockify.config import TRACKS_COLLECTION
from mockify.core.schema import FieldFilter, ResourceSchema


class TrackFields(BaseModel):
    """Client-writable track fields, in validation order. ``duur`` is in seconds."""
    model_config = ConfigDict(extra="forbid", strict=True)

    naam: str = Field(min_length=1)
    bpm: int
    duur: int
    jaar: int
    artiesten: List[str] = Field(min_length=1)
    genres: List[str] = Field(min_length=1)
    spotify_url: str = ""


TRACKS = ResourceSchema(
    name=TRACKS_COLLECTION,
    fields=TrackFields,
    display_field="naam",
    filters=(
        FieldFilter("naam", "naam"),
        FieldFilter("artiest", "artiesten", "any_contains"),
        FieldFilter("genre", "genres", "any_contains"),
        FieldFilter("jaar", "jaar", "int"),
    ),
)
