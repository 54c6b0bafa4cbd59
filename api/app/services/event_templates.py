"""
Canned gathering copy used when the live matcher is unavailable.

Each event template is fully specified (venue, timing, starters, rationale) so a
fallback gathering is presentable without any external call.
"""

from typing import Any


# =============================================================================
# EVENT LIBRARY - one template per fallback gathering, in recommendation order
# =============================================================================

EVENT_TEMPLATES: list[dict[str, Any]] = [
    {
        "title": "Supper Club at the Long Table",
        "type": "Dinner",
        "description": (
            "A family-style dinner for a small group at one long table. Shared plates, "
            "no phones on the table, and a host who keeps the conversation moving."
        ),
        "venue": "The Commons Kitchen",
        "address": "248 Smith St, Brooklyn, NY 11231",
        "suggested_date": "This Saturday",
        "suggested_time": "7:30 PM",
        "conversation_starters": [
            "What's a meal you still think about years later?",
            "What's something you changed your mind about this year?",
            "If you could master one skill overnight, what would it be?",
        ],
        "why_this_event": (
            "A shared table makes it easy to talk to everyone, and slow dinners give "
            "real conversation room to happen."
        ),
        "compatibility_score": 92,
    },
    {
        "title": "Comedy Night and Nightcap",
        "type": "Live Entertainment",
        "description": (
            "A reserved booth for a stand-up showcase, followed by drinks at the bar "
            "next door to trade favorite bits."
        ),
        "venue": "Union Hall",
        "address": "702 Union St, Brooklyn, NY 11215",
        "suggested_date": "This Friday",
        "suggested_time": "8:00 PM",
        "conversation_starters": [
            "Who is the funniest person you know in real life?",
            "What's the best live show you've ever been to?",
            "What always makes you laugh, no matter what?",
        ],
        "why_this_event": (
            "Laughing together breaks the ice fast, and the nightcap gives everyone a "
            "relaxed way to keep talking."
        ),
        "compatibility_score": 87,
    },
    {
        "title": "Sunday Morning Park Walk and Coffee",
        "type": "Outdoor",
        "description": (
            "An easy loop through the park with a coffee stop at the end. Low pressure, "
            "daylight, and plenty of room to switch walking partners."
        ),
        "venue": "Prospect Park Boathouse",
        "address": "101 East Dr, Brooklyn, NY 11225",
        "suggested_date": "This Sunday",
        "suggested_time": "10:00 AM",
        "conversation_starters": [
            "Where do you go in the city when you need to reset?",
            "What's a small ritual that makes your week better?",
            "What's the next trip you're dreaming about?",
        ],
        "why_this_event": (
            "Walking side by side takes the pressure off, and a daytime plan suits "
            "people who prefer to get to know each other slowly."
        ),
        "compatibility_score": 84,
    },
]


# =============================================================================
# MATCH REASONS - rotated by member position
# =============================================================================

MATCH_REASON_TEMPLATES = [
    "{name} shares your focus on {value} and brings a calm, curious energy to a group.",
    "{name} is based in {neighborhood} and loves the kind of unhurried plans you described.",
    "{name} values {value} too, and is known for asking the questions that get people talking.",
    "{name} is looking for real connection and tends to make newcomers feel at home.",
    "{name} balances your energy well and is excited to meet people in person.",
]

DEFAULT_VALUE = "authenticity"


def match_reason(position: int, name: str, neighborhood: str, values: list[str] | None = None) -> str:
    template = MATCH_REASON_TEMPLATES[position % len(MATCH_REASON_TEMPLATES)]
    value = (values[position % len(values)] if values else DEFAULT_VALUE).lower()
    return template.format(name=name, neighborhood=neighborhood, value=value)
