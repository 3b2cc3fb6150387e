#!/usr/bin/env python3
"""
Command-line interface for the magic number trick.

Usage:
    magic-number                        # play with saved settings
    magic-number play --max-number 127 --layout scattered
    magic-number demo 42                # watch the trick guess 42
    magic-number settings show
    magic-number settings set --max-number 31 --layout ascending
"""

import argparse
import logging
import random
import sys
from typing import Callable, List, Optional, TextIO

from .cards.generator import responses_for
from .cards.layout import format_card
from .game.phases import Calculating, Revealing
from .game.session import GameSession
from .messages import reveal_headline, reveal_subtitle
from .sentry_config import capture_exception, init_sentry
from .settings import SettingsRepository
from .types import SUPPORTED_MAX_NUMBERS, InvalidRangeError, NumberLayout, Settings
from .voice import VoiceCommand, parse_command

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ABORTED = 1
EXIT_INVALID = 2

QUIT_WORDS = frozenset({"q", "quit", "exit"})
SHORT_ANSWERS = {"y": VoiceCommand.YES, "n": VoiceCommand.NO}


def parse_answer(line: str) -> Optional[VoiceCommand]:
    """Interpret a typed answer: y/n or anything the voice parser accepts."""
    text = line.strip().lower()
    if text in SHORT_ANSWERS:
        return SHORT_ANSWERS[text]
    return parse_command(text)


def _layout_arg(value: str) -> NumberLayout:
    try:
        return NumberLayout.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="magic-number",
        description="Think of a number. Answer yes or no for each card. I'll tell you your number.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--settings", type=str, default=None,
                        help="Settings file (default: $MAGIC_NUMBER_SETTINGS or ~/.magic_number/settings.json)")

    subparsers = parser.add_subparsers(dest="command")

    play = subparsers.add_parser("play", help="Play the trick interactively (default)")
    play.add_argument("--max-number", type=int, default=None, choices=SUPPORTED_MAX_NUMBERS,
                      help="Override the saved range ceiling for this game")
    play.add_argument("--layout", type=_layout_arg, default=None,
                      help="Override the saved number layout (ascending or scattered)")
    play.add_argument("--no-gate", action="store_true",
                      help="Reveal immediately after the last card")
    play.add_argument("--seed", type=int, default=None,
                      help="Random seed for the scattered layout")

    demo = subparsers.add_parser("demo", help="Play automatically for a given number")
    demo.add_argument("number", type=int, help="The secret number")
    demo.add_argument("--max-number", type=int, default=None, choices=SUPPORTED_MAX_NUMBERS,
                      help="Override the saved range ceiling")

    settings = subparsers.add_parser("settings", help="Show or change saved settings")
    settings_sub = settings.add_subparsers(dest="settings_command")
    settings_sub.add_parser("show", help="Print the saved settings")
    settings_set = settings_sub.add_parser("set", help="Change saved settings")
    settings_set.add_argument("--max-number", type=int, default=None, choices=SUPPORTED_MAX_NUMBERS)
    settings_set.add_argument("--layout", type=_layout_arg, default=None)

    return parser


def _settings_for(repository: SettingsRepository, max_number: Optional[int] = None,
                  layout: Optional[NumberLayout] = None) -> Settings:
    settings = repository.load()
    if max_number is not None:
        settings = settings.with_max_number(max_number)
    if layout is not None:
        settings = settings.with_number_layout(layout)
    return settings


def _print_reveal(number: int, out: TextIO):
    print("", file=out)
    print(reveal_headline(number), file=out)
    subtitle = reveal_subtitle(number)
    if subtitle:
        print(subtitle, file=out)
    print(f"\n    {number}\n", file=out)


def run_play(args, repository: SettingsRepository,
             read_line: Optional[Callable[[str], str]] = None,
             out: Optional[TextIO] = None) -> int:
    """Play one interactive game. Returns an exit code.

    Output goes to `out` (stdout if None); answers are read with `read_line`
    (input() if None).
    """
    read_line = read_line or input
    settings = _settings_for(repository, args.max_number, args.layout)
    session = GameSession(reveal_gate=not args.no_gate)
    rng = random.Random(args.seed)

    state = session.start(settings)
    print(f"Think of a number between 1 and {settings.max_number}.", file=out)
    print("For each card, answer yes if your number is on it, no if it isn't.", file=out)

    while state.current_card is not None:
        answered, total = state.progress
        print(f"\nCard {answered + 1} of {total}", file=out)
        print(format_card(state.current_card, state.number_layout, rng=rng), file=out)

        command = None
        while command is None:
            try:
                line = read_line("Is your number on this card? [y/n] ")
            except EOFError:
                print("\nGame aborted.", file=out)
                return EXIT_ABORTED
            if line.strip().lower() in QUIT_WORDS:
                print("Game aborted.", file=out)
                return EXIT_ABORTED
            command = parse_answer(line)
            if command is None:
                print("Please answer yes or no.", file=out)

        session.apply_command(command)
        state = session.state

    if isinstance(state.phase, Calculating):
        try:
            read_line("\nReading your mind... press Enter to reveal. ")
        except EOFError:
            pass
        session.reveal()

    if isinstance(session.state.phase, Revealing):
        session.complete_reveal()

    number = session.state.revealed_number
    _print_reveal(number, out)
    return EXIT_OK


def run_demo(args, repository: SettingsRepository, out: Optional[TextIO] = None) -> int:
    """Play the trick automatically for args.number. Returns an exit code."""
    settings = _settings_for(repository, args.max_number)
    if not 1 <= args.number <= settings.max_number:
        print(f"Number must be between 1 and {settings.max_number}, got {args.number}", file=out)
        return EXIT_INVALID

    session = GameSession(reveal_gate=False)
    state = session.start(settings)
    for card, answer in zip(state.cards, responses_for(args.number, state.cards)):
        print(f"Card {card.key_number:>3}: {'yes' if answer else 'no'}", file=out)
        session.apply_command(VoiceCommand.YES if answer else VoiceCommand.NO)
    session.complete_reveal()

    _print_reveal(session.state.revealed_number, out)
    return EXIT_OK


def run_settings(args, repository: SettingsRepository, out: Optional[TextIO] = None) -> int:
    """Show or update persisted settings. Returns an exit code."""
    if getattr(args, "settings_command", None) == "set":
        if args.max_number is None and args.layout is None:
            print("Nothing to change: pass --max-number and/or --layout", file=out)
            return EXIT_INVALID
        if args.max_number is not None:
            repository.update_max_number(args.max_number)
        if args.layout is not None:
            repository.update_number_layout(args.layout)
        logger.info(f"Settings saved to {repository.path}")

    settings = repository.load()
    print(f"Settings file: {repository.path}", file=out)
    print(f"  max_number:    {settings.max_number} ({settings.card_count} cards)", file=out)
    print(f"  number_layout: {settings.number_layout.name.lower()}", file=out)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the magic-number CLI."""
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        # Bare invocation plays a game
        args = parser.parse_args([*argv, "play"])
    command = args.command

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    init_sentry()

    repository = SettingsRepository(args.settings)

    try:
        if command == "demo":
            return run_demo(args, repository)
        if command == "settings":
            return run_settings(args, repository)
        return run_play(args, repository)
    except (InvalidRangeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID
    except KeyboardInterrupt:
        print("\nGame aborted.", file=sys.stderr)
        return EXIT_ABORTED
    except Exception as e:
        capture_exception(e, command=command)
        raise


if __name__ == "__main__":
    sys.exit(main())
