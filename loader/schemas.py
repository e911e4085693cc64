from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field


TBaseRecord = TypeVar("TBaseRecord", bound="BaseRecord")


class BaseRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str = Field(min_length=1)

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_dict(cls: type[TBaseRecord], data: Mapping[str, object]) -> TBaseRecord:
        return cls.model_validate(data)


class PokemonRecord(BaseRecord):
    attack: float = 0
    defense: float = 0


RECORD_TYPES: dict[str, type[BaseRecord]] = {
    "pokemon": PokemonRecord,
}


def resolve_record_type(name: str) -> type[BaseRecord]:
    try:
        return RECORD_TYPES[name.lower()]
    except KeyError:
        known = ", ".join(sorted(RECORD_TYPES))
        raise ValueError(f"Unknown record type: {name} (known: {known})") from None
