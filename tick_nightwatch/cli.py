"""Terminal driver - menu, per-turn prompt and signal printing.

Commands are read one per tick; every simulation message arrives through
the session's signal bus.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable

from tick_nightwatch import signals
from tick_nightwatch.commands import Action, parse_action
from tick_nightwatch.render import EXPLAIN_TEXT, render_map, render_status
from tick_nightwatch.session import ActionSource, Session
from tick_nightwatch.simulation import Simulation

Reader = Callable[[str], str]
Writer = Callable[[str], None]

MENU_TEXT = "Please select an option.\n\t New Game \n\t Custom Night \n\t Explain \n\t Exit"
PROMPT = "What is your move this turn? : "


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Nightwatch - survive five nights in the office")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log simulation details")
    return p.parse_args(argv)


def make_signal_printer(write: Writer) -> Callable[[str, dict[str, Any]], None]:
    def on_signal(signal: str, data: dict[str, Any]) -> None:
        if signal == signals.DUSK:
            if data.get("custom"):
                write("Dusk of Custom Night")
            else:
                write(f"Dusk of Night {data.get('night', '?')}")
        elif signal == signals.SIGHTING:
            write(f"You see {data.get('name', '?')} is at the {data.get('side', '?')} door!")
        elif signal == signals.POWER_OUT:
            write("You ran out of power! All systems are down!")
        elif signal == signals.BLACKOUT_WARNING:
            write(data.get("message", ""))
        elif signal == signals.DEATH:
            write(f"You were attacked by {data.get('killer', '?')}! Game over!")
        elif signal == signals.SURVIVED:
            write("You survived the night! Congratulations!\n")
        elif signal == signals.WON:
            write(f"You survived all {data.get('nights', '?')} nights! Congratulations!\n")

    return on_signal


def make_terminal_player(read: Reader, write: Writer) -> ActionSource:
    """Prompt until a command the simulation accepts is entered."""

    def next_action(sim: Simulation) -> Action:
        write(render_status(sim))
        while True:
            action = parse_action(read(PROMPT))
            if action is None or not sim.accepts(action):
                write("Invalid command!")
                continue
            if action is Action.CAMERA:
                write(render_map(sim))
            return action

    return next_action


def read_custom_difficulties(session: Session, read: Reader) -> dict[str, str]:
    return {
        name: read(f"Please enter the difficulty for {name}: ")
        for name in session.config.default_difficulties
    }


def run_menu(session: Session, read: Reader = input, write: Writer = print) -> None:
    player = make_terminal_player(read, write)
    while True:
        write("Main Menu: ")
        write(MENU_TEXT)
        choice = read("").strip().lower()
        if choice == "new game":
            session.new_game()
            session.play(player)
        elif choice == "custom night":
            session.custom_night(read_custom_difficulties(session, read))
            session.play(player)
        elif choice == "explain":
            write(EXPLAIN_TEXT)
        elif choice == "exit":
            return
        else:
            write("Invalid command!")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    session = Session(seed=args.seed)
    session.bus.subscribe("*", make_signal_printer(print))

    print("Welcome to Nightwatch.")
    try:
        run_menu(session)
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
