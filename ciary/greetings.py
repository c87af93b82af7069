"""Personalised welcome and goodbye messages."""

from __future__ import annotations

import datetime
import random
from typing import Protocol

from ciary.config import MAX_NAME_LENGTH, Config

MAX_MESSAGE_LENGTH = 511

_SEASON_MESSAGES = {
    "winter": (
        "winter's crisp embrace",
        "the frosty season",
        "winter's quiet wisdom",
        "the season of reflection",
        "winter's cozy sanctuary",
    ),
    "spring": (
        "spring's hopeful awakening",
        "the season of new beginnings",
        "spring's gentle renewal",
        "nature's grand resurrection",
        "the blooming season",
    ),
    "summer": (
        "summer's golden embrace",
        "the vibrant season",
        "summer's endless energy",
        "the sun-kissed days",
        "the season of adventure",
    ),
    "autumn": (
        "autumn's colorful wisdom",
        "the contemplative season",
        "fall's gentle transformation",
        "the harvest of memories",
        "autumn's golden serenity",
    ),
}

_WELCOME_TEMPLATES = (
    "Welcome back, {name}! Ready to capture thoughts {context}?",
    "Hello {name}! How is {context} treating you today?",
    "Greetings, {name}! Time to chronicle this moment {context}.",
    "Hey there, {name}! Let's make some memories {context}.",
    "{name}, welcome to your sanctuary {context}!",
    "Good to see you again, {name}! The day awaits your words {context}.",
    "Hello {name}! Ready to weave today's story {context}?",
    "Welcome, {name}! Your thoughts have a home here {context}.",
    "Ah, {name} returns! Time to document life {context}.",
    "Greetings, dear {name}! Let's capture the essence of {context}.",
    "Welcome home, {name}! Your digital diary awaits {context}.",
    "Hello {name}! Ready to paint today with words {context}?",
    "{name}, your storyteller's haven beckons {context}!",
    "Welcome back to your realm of reflection, {name}! {context} seems perfect for writing.",
    "Greetings, {name}! The blank page yearns for your wisdom {context}.",
)

_FAREWELLS = (
    "Until next time, {name}! Your thoughts are safe with Ciary.",
    "Farewell, {name}! May your words echo through time.",
    "See you soon, {name}! The pages await your return.",
    "Goodbye for now, {name}! Your story continues...",
    "Take care, {name}! Your diary will be here when you return.",
    "Au revoir, {name}! Keep those thoughts flowing.",
    "Until we meet again, {name}! Happy journaling!",
    "Farewell, dear {name}! Your chronicles are treasured here.",
)

_NIGHT_GOODBYE = "Sweet dreams, {name}! Let tonight's rest inspire tomorrow's words."
_MORNING_GOODBYE = "Have a wonderful morning, {name}! May the day bring inspiration."
_AFTERNOON_GOODBYE = "Enjoy your afternoon, {name}! Don't forget to capture those moments."
_EVENING_GOODBYE = "Have a peaceful evening, {name}! Perfect time for reflection."

PLAIN_GOODBYE = "Thank you for using Ciary!"


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def _now(now: datetime.datetime | None) -> datetime.datetime:
    return now if now is not None else datetime.datetime.now()


def _rng(rng: _RandomSource | None) -> _RandomSource:
    return rng if rng is not None else random.Random()


def get_username(config: Config) -> str:
    """Return the name the user wants to be addressed by."""
    return config.preferred_name[:MAX_NAME_LENGTH]


def get_time_greeting(now: datetime.datetime | None = None) -> str:
    """Return a phrase describing the time of day."""
    hour = _now(now).hour
    if hour < 5:
        return "burning the midnight oil"
    if hour < 12:
        return "bright and early"
    if hour < 17:
        return "in the thick of the day"
    if hour < 21:
        return "as evening settles in"
    return "as the night embraces us"


def get_season(now: datetime.datetime | datetime.date | None = None) -> str:
    """Return the northern-hemisphere season: winter, spring, summer or autumn."""
    when = now if now is not None else datetime.datetime.now()
    month, day = when.month, when.day
    if (month == 12 and day >= 21) or month <= 2 or (month == 3 and day < 20):
        return "winter"
    if (month == 3 and day >= 20) or month <= 5 or (month == 6 and day < 21):
        return "spring"
    if (month == 6 and day >= 21) or month <= 8 or (month == 9 and day < 22):
        return "summer"
    return "autumn"


def get_season_info(
    now: datetime.datetime | None = None,
    rng: _RandomSource | None = None,
) -> str:
    """Return a randomly chosen phrase about the current season."""
    messages = _SEASON_MESSAGES[get_season(_now(now))]
    return messages[_rng(rng).randrange(len(messages))]


def get_day_phase(now: datetime.datetime | None = None) -> str:
    """Return a phrase describing the phase of the day."""
    hour = _now(now).hour
    if hour < 6:
        return "in the quiet depths of night"
    if hour < 9:
        return "as dawn paints the sky"
    if hour < 12:
        return "in the morning's fresh promise"
    if hour < 15:
        return "under the midday sun"
    if hour < 18:
        return "in the afternoon's gentle flow"
    if hour < 21:
        return "as twilight approaches"
    return "in the evening's peaceful embrace"


def generate_welcome_message(
    config: Config,
    now: datetime.datetime | None = None,
    rng: _RandomSource | None = None,
) -> str:
    """Return a welcome message for the user, marking special days and times."""
    when = _now(now)
    source = _rng(rng)
    name = get_username(config)
    time_greeting = get_time_greeting(when)
    season_info = get_season_info(when, source)
    day_phase = get_day_phase(when)
    month, day, hour = when.month, when.day, when.hour
    weekday = when.isoweekday()

    if month == 1 and day == 1:
        message = (
            f"🎉 Happy New Year, {name}! What better way to start than with "
            f"fresh thoughts? {day_phase}"
        )
    elif month == 12 and day == 25:
        message = (
            f"🎄 Merry Christmas, {name}! Even holidays deserve thoughtful "
            f"documentation {day_phase}."
        )
    elif month == 10 and day == 31:
        message = (
            f"🎃 Happy Halloween, {name}! Time to record some spooky thoughts "
            f"{day_phase}."
        )
    elif weekday == 1 and hour < 10:
        message = (
            f"Monday warrior {name}! Let's conquer this week one entry at a "
            f"time {day_phase}."
        )
    elif weekday == 5 and hour > 17:
        message = f"TGIF, {name}! Time to reflect on the week's journey {day_phase}."
    elif hour < 4:
        message = (
            f"Night owl {name}! Those midnight thoughts are often the most "
            f"profound {day_phase}."
        )
    elif hour > 22:
        message = (
            f"Evening contemplator {name}! Perfect time for reflection {day_phase}."
        )
    else:
        template = _WELCOME_TEMPLATES[source.randrange(len(_WELCOME_TEMPLATES))]
        context = (time_greeting, season_info, day_phase)[source.randrange(3)]
        message = template.format(name=name, context=context)
    return message[:MAX_MESSAGE_LENGTH]


def generate_goodbye_message(
    config: Config,
    now: datetime.datetime | None = None,
    rng: _RandomSource | None = None,
) -> str:
    """Return the farewell printed when the application exits."""
    if not config.enable_personalization:
        return PLAIN_GOODBYE
    hour = _now(now).hour
    source = _rng(rng)
    if hour >= 22 or hour < 6:
        template = _NIGHT_GOODBYE
    elif hour < 12:
        template = _MORNING_GOODBYE
    elif hour < 18:
        template = _AFTERNOON_GOODBYE
    else:
        template = _EVENING_GOODBYE
    if source.randrange(3) == 0:
        template = _FAREWELLS[source.randrange(len(_FAREWELLS))]
    return template.format(name=get_username(config))