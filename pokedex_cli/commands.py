"""The Pokedex commands and the state they share."""

from __future__ import annotations

import random
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Callable, Protocol

from .cache import Cache
from .models import LocationArea, LocationPage, Pokemon

API_ROOT = "https://pokeapi.co/api/v2/"
LOCATION_AREA_URL = API_ROOT + "location-area/"
POKEMON_URL = API_ROOT + "pokemon/"
CACHE_INTERVAL = 5.0
CATCH_ROLL_LIMIT = 666

CAUGHT = "Gotcha!"
SO_CLOSE = "Shoot! It was so close, too!"
ALMOST = "Aargh! Almost had it!"
APPEARED_CAUGHT = "Aww! It appeared to be caught!"
BROKE_FREE = "Oh, no! The Pokemon broke free!"


class ApiError(Exception):
    """Raised when a request to the API fails."""


class _Roller(Protocol):
    def randrange(self, stop: int) -> int: ...


def http_get(url: str) -> bytes:
    """Fetch ``url`` and return the response body."""
    try:
        with urllib.request.urlopen(url, timeout=30) as response:
            return response.read()
    except urllib.error.HTTPError as exc:
        raise ApiError(f"response failed with status code: {exc.code}") from exc
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise ApiError(str(exc)) from exc


def _new_cache() -> Cache:
    return Cache(CACHE_INTERVAL)


@dataclass
class Config:
    """State carried between commands of one session."""

    cache: Cache = field(default_factory=_new_cache)
    next: str | None = LOCATION_AREA_URL
    previous: str | None = None
    name: str = ""
    caught_pokemon: dict[str, Pokemon] = field(default_factory=dict)
    fetch: Callable[[str], bytes] = http_get
    rng: _Roller = field(default_factory=random.Random)


@dataclass(frozen=True)
class CliCommand:
    """A command the prompt understands."""

    name: str
    description: str
    callback: Callable[[Config], None]


def catch_outcome(base_experience: int, roll: int) -> str:
    """Message for a throw that rolled ``roll`` against ``base_experience``.

    The throw succeeds exactly when the result is ``CAUGHT``.
    """
    if roll >= base_experience:
        return CAUGHT
    if base_experience > roll > base_experience - 30:
        return SO_CLOSE
    if base_experience - 30 > roll > base_experience - 60:
        return ALMOST
    if base_experience - 60 > roll > base_experience - 90:
        return APPEARED_CAUGHT
    return BROKE_FREE


def _cached_body(config: Config, url: str, decode: Callable[[bytes], object]):
    cached = config.cache.get(url)
    if cached is not None:
        return decode(cached)
    body = config.fetch(url)
    decoded = decode(body)
    config.cache.add(url, body)
    return decoded


def command_catch(config: Config) -> None:
    """Throw a Pokeball at the named Pokemon."""
    if not config.name:
        print("Please enter the Pokemon you wish to catch")
        return
    pokemon = Pokemon.from_json(config.fetch(POKEMON_URL + config.name))
    print(f"Throwing a Pokeball at {config.name}...")
    outcome = catch_outcome(
        pokemon.base_experience, config.rng.randrange(CATCH_ROLL_LIMIT)
    )
    print(outcome)
    if outcome == CAUGHT:
        print(f"{pokemon.name} was caught!")
        config.caught_pokemon[pokemon.name] = pokemon


def command_explore(config: Config) -> None:
    """List the Pokemon that can be met in the named area."""
    if not config.name:
        print("Please enter the name of an area")
        return
    area = _cached_body(config, LOCATION_AREA_URL + config.name, LocationArea.from_json)
    for name in area.pokemon_names():
        print(name)


def _show_page(config: Config, url: str) -> None:
    page = _cached_body(config, url, LocationPage.from_json)
    for name in page.results:
        print(name)
    config.next = page.next
    config.previous = page.previous


def command_map(config: Config) -> None:
    """Show the next page of location areas."""
    if not config.next:
        raise ApiError("there are no more locations")
    _show_page(config, config.next)


def command_mapb(config: Config) -> None:
    """Show the previous page of location areas."""
    if not config.previous:
        print("You're on the first page")
        return
    _show_page(config, config.previous)


def command_inspect(config: Config) -> None:
    """Describe a Pokemon that has been caught."""
    pokemon = config.caught_pokemon.get(config.name)
    if pokemon is None:
        print("You haven't caught that Pokemon yet.")
        return
    print(f"Name: {pokemon.name}")
    print(f"Height: {pokemon.height}")
    print(f"Weight: {pokemon.weight}")
    print("Stats:")
    for stat in pokemon.stats:
        print(f"- {stat.name}")
    print("Types:")
    for kind in pokemon.types:
        print(f"- {kind.name}")


def command_pokedex(config: Config) -> None:
    """List every Pokemon caught so far."""
    if not config.caught_pokemon:
        print("You haven't caught any Pokemon yet.")
        return
    print(f"You have caught {len(config.caught_pokemon)} Pokemon")
    for pokemon in config.caught_pokemon.values():
        print(f"- #{pokemon.id} {pokemon.name}")


def command_exit(config: Config) -> None:
    """Say goodbye and end the program."""
    print("Closing the Pokedex... Goodbye!")
    raise SystemExit(0)


def command_help(config: Config) -> None:
    """Print the list of commands."""
    print("\nWelcome to the Pokedex!")
    print("Usage:\n")
    for command in get_commands().values():
        print(f"{command.name}: {command.description}")


def get_commands() -> dict[str, CliCommand]:
    """All commands, keyed by the word that starts them."""
    commands = [
        CliCommand("exit", "Exit the Pokedex", command_exit),
        CliCommand("help", "Displays a help message", command_help),
        CliCommand("map", "Displays the next 20 locations", command_map),
        CliCommand("mapb", "Displays the previous 20 locations", command_mapb),
        CliCommand("explore", "Displays all Pokemon in an area", command_explore),
        CliCommand("catch", "Attempt to catch a Pokemon", command_catch),
        CliCommand("pokedex", "See what Pokemon you've caught", command_pokedex),
        CliCommand("inspect", "Learn about your Pokemon", command_inspect),
    ]
    return {command.name: command for command in commands}