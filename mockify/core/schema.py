"""Resource descriptors: writable fields, list filters and sort field per collection."""
import re
import unicodedata
from dataclasses import dataclass, field
from functools import cached_property
from typing import Annotated, Any, Literal, Optional, Sequence, Type, get_args, get_origin

from pydantic import BaseModel, ConfigDict, create_model
from pydantic.fields import FieldInfo

MatchKind = Literal["contains", "any_contains", "equals", "int"]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def sort_key(value: Any) -> tuple:
    """Comparison key approximating locale collation: accents and case only break ties."""
    text = value if isinstance(value, str) else ("" if value is None else str(value))
    base = "".join(
        c for c in unicodedata.normalize("NFKD", text) if not unicodedata.combining(c)
    )
    return (base.casefold(), text.casefold(), text)


def parse_id(value: Any) -> Optional[int]:
    """Integer value of a path/query id, or None if it has no leading digits.

    Leading whitespace and a sign are allowed; anything after the digits is
    ignored, so "1abc" and "1.5" both give 1.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def _annotation(info: FieldInfo):
    # Re-attach constraints (min_length etc.) that pydantic moved into metadata
    if info.metadata:
        return Annotated[(info.annotation, *info.metadata)]
    return info.annotation


@dataclass(frozen=True)
class FieldFilter:
    """One list-query filter: ?<param>=<value> checked against record[field]."""
    param: str
    field: str
    match: MatchKind = "contains"

    def matches(self, record: dict, value: str) -> bool:
        actual = record.get(self.field)
        if self.match == "int":
            wanted = parse_id(value)
            # Non-numeric query values match nothing
            return wanted is not None and isinstance(actual, int) and actual == wanted
        needle = value.casefold()
        if self.match == "any_contains":
            if not isinstance(actual, list):
                return False
            return any(isinstance(v, str) and needle in v.casefold() for v in actual)
        if not isinstance(actual, str):
            return False
        if self.match == "equals":
            return actual.casefold() == needle
        return needle in actual.casefold()


@dataclass(frozen=True)
class ResourceSchema:
    """Everything the generic store and router need to know about one resource type.

    ``fields`` is a pydantic model listing the client-writable fields in the
    order they are validated; ``id`` is never part of it. The replace and
    patch models are derived from it.
    """
    name: str
    fields: Type[BaseModel]
    display_field: str
    filters: Sequence[FieldFilter] = field(default_factory=tuple)

    @property
    def create_model(self) -> Type[BaseModel]:
        return self.fields

    @cached_property
    def replace_model(self) -> Type[BaseModel]:
        """Same as create, with a required integer id declared first."""
        definitions: dict = {"id": (int, ...)}
        for name, info in self.fields.model_fields.items():
            definitions[name] = (_annotation(info), ... if info.is_required() else info.default)
        return create_model(
            f"{self.fields.__name__}Replace",
            __config__=ConfigDict(**self.fields.model_config),
            **definitions,
        )

    @cached_property
    def patch_model(self) -> Type[BaseModel]:
        """Every field optional; unknown fields (including id) are ignored."""
        definitions = {
            name: (_annotation(info), None) for name, info in self.fields.model_fields.items()
        }
        config = ConfigDict(**self.fields.model_config)
        config["extra"] = "ignore"
        return create_model(f"{self.fields.__name__}Patch", __config__=config, **definitions)

    def allowed_values(self, field_name: str) -> Optional[tuple]:
        """Values of a Literal-typed field, or None."""
        info = self.fields.model_fields.get(field_name)
        if info is None or get_origin(info.annotation) is not Literal:
            return None
        return get_args(info.annotation)

    def find_filter(self, param: str) -> Optional[FieldFilter]:
        """Filter declared for a query param, or None."""
        return next((f for f in self.filters if f.param == param), None)
