"""Domain entities — schema-less records with a strongly typed identifier."""

from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass
class Record:
    """Base record: a typed ``id`` plus an opaque mapping of every other field.

    Records round-trip through ``from_dict``/``to_dict`` without losing any
    client-supplied field.
    """

    id: Any
    fields: dict[str, Any] = field(default_factory=dict)

    entity_name: ClassVar[str] = "Record"

    @classmethod
    def from_dict(cls, raw: dict[str, Any]):
        fields = {k: v for k, v in raw.items() if k != "id"}
        return cls(id=raw.get("id"), fields=fields)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.fields}

    def merged(self, payload: dict[str, Any]):
        """Return a copy with ``payload`` applied on top; the id never changes."""
        fields = {**self.fields, **{k: v for k, v in payload.items() if k != "id"}}
        return type(self)(id=self.id, fields=fields)


@dataclass
class User(Record):
    """A user record. The id is an opaque string, client-supplied or generated."""

    id: str = ""

    entity_name: ClassVar[str] = "User"


@dataclass
class Product(Record):
    """A product record. The id is a server-assigned integer."""

    id: int = 0

    entity_name: ClassVar[str] = "Product"

    @property
    def price(self) -> float | None:
        value = self.fields.get("price")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return float(value)

    @property
    def category(self) -> str | None:
        return self.fields.get("category")
