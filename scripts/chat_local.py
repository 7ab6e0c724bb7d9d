#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP).

Usage:
  python3 scripts/chat_local.py

What it does:
- Starts a session and prints the greeting
- Sends your typed messages through the same ChatSessionUseCase the API uses
- Prints the dialogue step after each turn and the assistant replies
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from concierge.application.use_cases.chat_session import ChatSessionUseCase
from concierge.core.config import settings
from concierge.core.log_config import configure_logging
from concierge.domain.entities.session_state import SessionState
from concierge.wiring.dependencies import get_container


def _print_header(session_id: str) -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print(f"session_id: {session_id}")
    print("Type your message and press Enter.")
    print("Commands: /new (new session), /booked, /quit, /help")
    print("-" * 60)


def _print_assistant(text: str) -> None:
    for line in text.splitlines() or [""]:
        print(f"  {line}")


def _print_booked(state: SessionState) -> None:
    appointments = state.ledger.by_confirmation_time()
    if not appointments:
        print("(no appointments booked yet)")
        return
    for appointment in appointments:
        print(f"- {appointment.summary}: {appointment.name} <{appointment.email}> ({appointment.purpose})")


def _start(use_case: ChatSessionUseCase) -> SessionState:
    state = use_case.start_session()
    _print_header(state.session_id)
    for message in state.messages:
        _print_assistant(message.text)
    return state


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    container = get_container()
    use_case: ChatSessionUseCase = container["use_case"]
    state = _start(use_case)

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        cmd = user_text.lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            print("Commands:")
            print("  /new    -> start a new session (fresh calendar and bookings)")
            print("  /booked -> list appointments booked in this session")
            print("  /quit   -> exit")
            continue
        if cmd == "/new":
            state = _start(use_case)
            continue
        if cmd == "/booked":
            _print_booked(use_case.get_session(state.session_id))
            continue

        outcome = use_case.handle_turn(state.session_id, user_text)
        state = outcome.state
        print(f"[step={state.dialogue.step.value}]")
        for reply in outcome.replies:
            _print_assistant(reply.text)


if __name__ == "__main__":
    main()
