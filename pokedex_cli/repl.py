"""The interactive Pokedex prompt."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .cache import Cache
from .commands import CACHE_INTERVAL, ApiError, Config, get_commands
from .models import DecodeError

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def run_line(line: str, config: Config) -> None:
    """Run the command written on one input line."""
    words = clean_input(line)
    if not words:
        print("Please enter a command. Try 'help'.")
        return
    if len(words) > 1:
        config.name = words[1]
    try:
        command = get_commands().get(words[0])
        if command is None:
            print("Unknown command")
            return
        try:
            command.callback(config)
        except (ApiError, DecodeError) as exc:
            print("Error:", exc)
    finally:
        config.name = ""


def start_repl(config: Config | None = None, stream: TextIO | None = None) -> None:
    """Read commands from ``stream`` until it ends or ``exit`` is run."""
    if config is None:
        config = Config()
    if stream is None:
        stream = sys.stdin
    while True:
        print(PROMPT, end="", flush=True)
        line = stream.readline()
        if not line:
            print()
            return
        run_line(line, config)


def main(argv: list[str] | None = None) -> int:
    """Start the Pokedex prompt."""
    parser = argparse.ArgumentParser(prog="pokedex", description="An interactive Pokedex.")
    parser.parse_args(argv)
    with Cache(CACHE_INTERVAL) as cache:
        start_repl(Config(cache=cache))
    return 0