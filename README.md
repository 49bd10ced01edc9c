# pokedex-cli

An interactive Pokedex for the terminal. Walk through the location areas of
the Pokemon world, see which Pokemon live in each one, throw Pokeballs at them
and keep track of the ones you catch during a session. Data comes from the
public PokeAPI.

## Installation

```
pip install .
```

Python 3.10 or later is needed. The package uses only the standard library.

## Usage

Start the prompt:

```
pokedex
```

`pokedex --help` prints a short usage line; the command takes no other
options.

You are then shown the `Pokedex > ` prompt. Input is lower-cased and split on
whitespace; the first word is the command and the second, if there is one, is
its argument. An empty line asks you to enter a command, and a word that is not
a command prints `Unknown command`. The prompt ends on `exit` or at the end of
input.

| Command             | What it does                          |
|---------------------|---------------------------------------|
| `help`              | Displays a help message               |
| `map`               | Displays the next 20 locations        |
| `mapb`              | Displays the previous 20 locations    |
| `explore <area>`    | Displays all Pokemon in an area       |
| `catch <pokemon>`   | Attempt to catch a Pokemon            |
| `inspect <pokemon>` | Learn about your Pokemon              |
| `pokedex`           | See what Pokemon you've caught        |
| `exit`              | Exit the Pokedex                      |

An example session (the names and numbers shown come from the API):

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
tentacool
tentacruel
...
Pokedex > catch tentacool
Throwing a Pokeball at tentacool...
Gotcha!
tentacool was caught!
Pokedex > inspect tentacool
Name: tentacool
Height: 9
Weight: 455
Stats:
- hp
...
Types:
- water
- poison
Pokedex > exit
Closing the Pokedex... Goodbye!
```

### Notes on the commands

- `map` starts at the first page of location areas and moves forward one page
  each time; `mapb` moves back and prints `You're on the first page` when there
  is no earlier page. Past the last page, `map` reports an error.
- Location pages and area listings fetched by `map`, `mapb` and `explore` are
  kept in an in-memory cache whose entries are dropped after about five
  seconds.
- Whether a throw succeeds depends on the Pokemon's base experience: a random
  roll from 0 to 665 must reach it, so the stronger the Pokemon, the harder it
  is to catch. A near miss tells you how close you came.
- Failed requests and malformed responses are printed as `Error: ...` and the
  prompt carries on.

## Using it from Python

The pieces can be used on their own:

- `pokedex_cli.repl.clean_input(text)` lower-cases and splits a line;
  `run_line(line, config)` runs one command; `start_repl(config, stream)` reads
  commands from any text stream.
- `pokedex_cli.commands.Config` holds the session state: the cache, the
  current `next` and `previous` page URLs, the caught Pokemon, and the `fetch`
  function and random generator used, both of which can be replaced.
  `get_commands()` returns every `CliCommand` by name, and
  `catch_outcome(base_experience, roll)` gives the message for a throw.
- `pokedex_cli.models` decodes API responses into `Pokemon`, `LocationArea`
  and `LocationPage`, raising `DecodeError` on bad input.
- `pokedex_cli.cache.Cache(interval)` is a thread-safe byte cache with
  `add`, `get` and `close`, usable as a context manager.

## What it does not do

Caught Pokemon live only as long as the session: nothing is saved to disk, and
the cache is kept in memory only.

## Running the tests

```
pip install ".[test]"
python -m pytest
```