from __future__ import annotations


def build_greeting() -> str:
    return (
        "Hello there! I'm your scheduling assistant. Let's find the perfect time for your meeting. "
        "May I have your full name to get started?"
    )


def build_name_acknowledgement(first_name: str) -> str:
    return f"Wonderful, {first_name}. What's the best email address for your confirmation?"
