"""
Core domain models for the books service.
These are framework-agnostic and shared by the store and the API layer.
"""
from dataclasses import dataclass, field
import secrets
import string
from typing import Any, Dict

ID_LENGTH = 10
ID_ALPHABET = string.ascii_letters + string.digits


@dataclass
class Book:
    """
    A single book record.

    Only `id` and `name` are known fields; anything else the client sent
    on creation is kept in `extra` and written back out unchanged.
    """
    id: str
    name: str
    extra: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def generate_id(length: int = ID_LENGTH) -> str:
        return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Book":
        extra = {k: v for k, v in data.items() if k not in ("id", "name")}
        return cls(
            id=data["id"],
            name=data["name"],
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        # extra fields follow in the order the client sent them
        return {"id": self.id, "name": self.name, **self.extra}
