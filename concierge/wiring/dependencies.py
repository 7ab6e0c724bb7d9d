from functools import lru_cache

from concierge.application.ports.calendar import CalendarPort
from concierge.application.ports.session_store import SessionStorePort
from concierge.application.use_cases.chat_session import ChatSessionUseCase
from concierge.application.use_cases.dialogue import DialogueUseCase
from concierge.core.config import settings
from concierge.infrastructure.calendar.business_day_calendar import BusinessDayCalendar
from concierge.infrastructure.store.memory_store import MemorySessionStore


_session_store: MemorySessionStore | None = None


def get_session_store() -> SessionStorePort:
    global _session_store
    if _session_store is None:
        _session_store = MemorySessionStore(history_limit=settings.SESSION_HISTORY_LIMIT)
    return _session_store


def get_calendar() -> CalendarPort:
    return BusinessDayCalendar(
        business_days=settings.AVAILABILITY_BUSINESS_DAYS,
        times=tuple(settings.AVAILABILITY_TIMES),
    )


@lru_cache
def get_dialogue_use_case() -> DialogueUseCase:
    return DialogueUseCase(alternative_limit=settings.ALTERNATIVE_SLOT_LIMIT)


def get_chat_session_use_case() -> ChatSessionUseCase:
    return ChatSessionUseCase(
        store=get_session_store(),
        calendar=get_calendar(),
        dialogue=get_dialogue_use_case(),
    )


def get_container() -> dict[str, object]:
    return {
        "use_case": get_chat_session_use_case(),
        "store": get_session_store(),
    }
