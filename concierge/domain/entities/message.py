from dataclasses import dataclass


@dataclass(frozen=True)
class Message:
    id: str
    sender: str  # "assistant" | "user"
    text: str
    timestamp: int  # epoch milliseconds
