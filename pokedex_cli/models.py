"""Records decoded from the PokeAPI JSON responses the Pokedex uses."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


class DecodeError(ValueError):
    """Raised when a response body is not the JSON document expected."""


def _load(body: bytes | str) -> dict[str, Any]:
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(str(exc)) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DecodeError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"field {key!r} must be a string, got {value!r}")
    return value


def _opt_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodeError(f"field {key!r} must be a string, got {value!r}")
    return value


def _obj(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(f"field {key!r} must be an object, got {value!r}")
    return value


def _objects(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DecodeError(f"field {key!r} must be a list, got {value!r}")
    items = []
    for item in value:
        if item is None:
            items.append({})
        elif isinstance(item, dict):
            items.append(item)
        else:
            raise DecodeError(f"items of {key!r} must be objects, got {item!r}")
    return items


@dataclass(frozen=True)
class Stat:
    """One base stat of a Pokemon."""

    name: str
    base_stat: int = 0
    effort: int = 0


@dataclass(frozen=True)
class PokemonType:
    """One type slot of a Pokemon."""

    name: str
    slot: int = 0


@dataclass(frozen=True)
class Pokemon:
    """The parts of a Pokemon record the Pokedex uses."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    stats: tuple[Stat, ...] = field(default_factory=tuple)
    types: tuple[PokemonType, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, body: bytes | str) -> Pokemon:
        """Decode a ``/pokemon/<name>`` response body."""
        data = _load(body)
        stats = tuple(
            Stat(
                name=_str(_obj(item, "stat"), "name"),
                base_stat=_int(item, "base_stat"),
                effort=_int(item, "effort"),
            )
            for item in _objects(data, "stats")
        )
        types = tuple(
            PokemonType(name=_str(_obj(item, "type"), "name"), slot=_int(item, "slot"))
            for item in _objects(data, "types")
        )
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            stats=stats,
            types=types,
        )


@dataclass(frozen=True)
class LocationArea:
    """A location area and the Pokemon that can be encountered there."""

    id: int = 0
    name: str = ""
    encounters: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, body: bytes | str) -> LocationArea:
        """Decode a ``/location-area/<name>`` response body."""
        data = _load(body)
        encounters = tuple(
            _str(_obj(item, "pokemon"), "name")
            for item in _objects(data, "pokemon_encounters")
        )
        return cls(id=_int(data, "id"), name=_str(data, "name"), encounters=encounters)

    def pokemon_names(self) -> list[str]:
        """Names of the encounterable Pokemon, in response order."""
        return list(self.encounters)


@dataclass(frozen=True)
class LocationPage:
    """One page of the paginated location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, body: bytes | str) -> LocationPage:
        """Decode a ``/location-area/`` listing page."""
        data = _load(body)
        results = tuple(_str(item, "name") for item in _objects(data, "results"))
        return cls(
            count=_int(data, "count"),
            next=_opt_str(data, "next"),
            previous=_opt_str(data, "previous"),
            results=results,
        )