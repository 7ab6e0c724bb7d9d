from __future__ import annotations

from concierge.domain.entities.appointment import AppointmentDraft

ASK_NAME_AGAIN = "I want to make sure I have your name correct. Could you please share your full name?"
ASK_EMAIL_AGAIN = (
    "It looks like I couldn't capture that email. "
    "Would you mind sharing it in a format like name@example.com?"
)
ASK_PURPOSE = "Thanks! What's the purpose of this meeting so I can note it accurately?"
ASK_PURPOSE_AGAIN = "A short note about the purpose helps me prepare. Could you share a brief description?"
ASK_DURATION = "Perfect. How long should we plan for? You can mention something like 30 minutes or 1 hour."
ASK_DURATION_AGAIN = (
    "Just to be sure, how many minutes should I block off? "
    "Feel free to say something like 45 minutes or 1 hour."
)
ASK_DATE = "Thank you. Do you have a preferred date for this appointment? Please mention a specific day."
ASK_DATE_AGAIN = (
    "I wasn't able to recognize that date. Could you share it again, perhaps including the month and day?"
)
ASK_TIME = "Great. What time works best for you on that day?"
ASK_TIME_AGAIN = "Got it. For clarity, what start time would you prefer? You can share it like 10:30 AM or 14:00."
ASK_TIMEZONE = "Lastly, which time zone should I use so we stay aligned?"
ASK_TIMEZONE_AGAIN = "To avoid any mix ups, which time zone should I reference?"
NOTHING_OPEN = (
    "It seems everything is booked around that time. Could you share another date or time that works for you?"
)
ASK_CONFIRMATION_AGAIN = (
    "Just let me know with a quick “yes” to confirm or “no” if we should look at another slot."
)
LOST_PENDING_SLOT = (
    "Thanks for confirming. I encountered a hiccup locating that slot. "
    "Could you share the preferred date and time once more?"
)
ASK_DIFFERENT_DATE = "No problem. Let's pick another time. Do you have a different date in mind?"
OFFER_FURTHER_HELP = "If you need any adjustments or want to schedule something else, just let me know."
START_NEXT_BOOKING = (
    "Happy to help further. Are you looking to book another appointment? "
    "If so, let's start with the attendee's name."
)
REALIGN_ON_NAME = "Let's make sure we're aligned. Could you please share the attendee's full name?"


def build_recap(draft: AppointmentDraft, slot_summary: str) -> str:
    return (
        "Here is what I have:\n"
        f"• Name: {draft.name}\n"
        f"• Email: {draft.email}\n"
        f"• Purpose: {draft.purpose}\n"
        f"• Duration: {draft.duration_minutes} minutes\n"
        f"• Preferred time: {slot_summary}\n\n"
        "Does this look right? Please confirm so I can reserve it."
    )


def build_alternatives(requested_summary: str, rendered_options: str) -> str:
    return (
        f"The {requested_summary} slot isn't open. Here are the closest options:\n"
        f"{rendered_options}\n\n"
        "Let me know which option works for you or share another preference."
    )


def build_booked(summary: str, name: str | None, email: str | None) -> str:
    return f"All set! I've booked {summary} for {name}. A confirmation will arrive at {email} shortly."
