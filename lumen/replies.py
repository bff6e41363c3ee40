# replies.py
# Rule-based reply selection: topic detection, theme extraction,
# suggestions and the reply composer. No I/O, no state between calls.
import datetime
import random
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

AGENT_NAME = "Lumen"

USER = "user"
ASSISTANT = "assistant"
ROLES = (USER, ASSISTANT)

GENERAL = "general"
TOPICS = ("time", "planning", "productivity", "mood", GENERAL)


@dataclass(frozen=True)
class Message:
    role: str
    content: str
    timestamp: datetime.datetime = field(default_factory=datetime.datetime.now)


class Reply(NamedTuple):
    reply: str
    topic: str


# ----------------------------
# Reply templates
# ----------------------------
GREETINGS = [
    "Hi there! What are we exploring today?",
    "Hey! I'm glad you're here. What's on your mind?",
    "Hello! Ready when you are, just share a thought.",
]

TUNED_IN = "I'm tuned in! Whenever you're ready, let me know what's on your radar."
TAKE_YOUR_TIME = "Take your time. I'm right here whenever you feel like sharing something."
FALLBACK_REPLY = "Whoops, my mind went blank for a second. Could you repeat that?"

SUGGESTIONS = {
    "time": [
        "Help me plan the rest of my day",
        "Remind me of something important later",
        "Suggest a quick reflection exercise",
    ],
    "productivity": [
        "Break my work into focused blocks",
        "Give me a motivation boost",
        "Help me celebrate a recent win",
    ],
    "mood": [
        "Share a grounding exercise",
        "Help me reframe a negative thought",
        "Suggest a relaxing break idea",
    ],
    "planning": [
        "Create a quick checklist",
        "Help me prioritize tasks",
        "Draft a mini roadmap",
    ],
    GENERAL: [
        "Give me a small challenge",
        "Share a curious fact",
        "Help me set a tiny goal",
    ],
}

# ----------------------------
# Topic detection (ordered, first match wins)
# ----------------------------
TOPIC_PATTERNS = [
    ("time", re.compile(r"time|date|clock|today|tonight|morning|evening")),
    ("planning", re.compile(r"plan|schedule|organize|roadmap|timeline")),
    ("productivity", re.compile(r"focus|productive|productivity|motivation|work|study")),
    ("mood", re.compile(r"sad|happy|mood|feel|feeling|tired|excited|stressed|stress")),
]

MIN_THEME_LENGTH = 4
_NON_ALNUM = re.compile(r"[^a-z0-9\s]")


def detect_topic(text: str) -> str:
    t = text.lower()
    for topic, pattern in TOPIC_PATTERNS:
        if pattern.search(t):
            return topic
    return GENERAL


def extract_themes(messages: Sequence[Message], limit: int = 3) -> List[str]:
    """Most frequent words (4+ chars) across the user's messages.

    Counter keeps insertion order, and sorted() is stable, so words with
    equal counts stay in the order they were first seen.
    """
    counts = Counter()
    for m in messages:
        if m.role != USER:
            continue
        for term in _NON_ALNUM.sub(" ", m.content.lower()).split():
            if len(term) >= MIN_THEME_LENGTH:
                counts[term] += 1
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [term for term, _ in ranked[:limit]]


def build_suggestions(topic: str) -> List[str]:
    return list(SUGGESTIONS.get(topic, SUGGESTIONS[GENERAL]))


def pick_greeting(rng=random) -> str:
    return rng.choice(GREETINGS)


def format_clock(now: datetime.datetime) -> str:
    # e.g. "Oct 18, 2026, 7:28 AM"
    hour = now.hour % 12 or 12
    return f"{now:%b} {now.day}, {now.year}, {hour}:{now:%M %p}"


# ----------------------------
# Reply rules
# ----------------------------
class Turn(NamedTuple):
    """What a rule handler gets to work with."""
    topic: str
    rng: object
    now: datetime.datetime


def _greeting(turn: Turn) -> Reply:
    return Reply(
        f"{pick_greeting(turn.rng)} Also, what's one thing you're curious about right now?",
        turn.topic,
    )


def _name(turn: Turn) -> Reply:
    return Reply(
        f"I'm {AGENT_NAME}! Think of me as your upbeat co-pilot for ideas, plans, "
        "and reflections. What's next on your mind?",
        turn.topic,
    )


def _clock(turn: Turn) -> Reply:
    return Reply(
        f"Right now it's {format_clock(turn.now)}. Want me to help block out the "
        "next hour or sketch a mini plan?",
        "time",
    )


def _help(turn: Turn) -> Reply:
    return Reply(
        "You've got my full attention. Give me a sentence or two about what you "
        "want help with, and I'll guide you through it step by step.",
        turn.topic,
    )


def _planning(turn: Turn) -> Reply:
    return Reply(
        "Let's architect something useful. Start with the big milestone, then we "
        "can break it into 3 bite-sized moves. What milestone should we anchor on?",
        "planning",
    )


def _low_energy(turn: Turn) -> Reply:
    return Reply(
        "Sounds like your energy is running low. Let's find a micro-reset: deep "
        "breath, unclench your shoulders, then name one win from today, no matter "
        "how small. Want a few reset ideas?",
        "mood",
    )


def _momentum(turn: Turn) -> Reply:
    return Reply(
        "We can spark some momentum. What's the next action you'd feel okay doing "
        "in the next 10 minutes? I'll help you lock it in and keep it light.",
        "productivity",
    )


def _thanks(turn: Turn) -> Reply:
    return Reply(
        "Always happy to help! If anything else pops up, even a tiny question, "
        "just drop it here.",
        turn.topic,
    )


def _identity(turn: Turn) -> Reply:
    return Reply(
        f"I'm {AGENT_NAME}, a conversational agent built to keep you company, offer "
        "structure, and nudge you toward momentum. Ask me for ideas, plans, or just "
        "to think out loud.",
        turn.topic,
    )


RULES: List[Tuple["re.Pattern[str]", Callable[[Turn], Reply]]] = [
    (re.compile(r"^(hi|hello|hey|yo|hiya|sup)([^a-z]|$)"), _greeting),
    (re.compile(r"your name"), _name),
    (re.compile(r"time|date|day is it"), _clock),
    (re.compile(r"help|advice|support"), _help),
    (re.compile(r"plan|schedule|organize|roadmap"), _planning),
    (re.compile(r"tired|stressed|overwhelmed|anxious|burned|burnt|exhausted"), _low_energy),
    (re.compile(r"focus|productive|productivity|motivation|bored|procrastinate"), _momentum),
    (re.compile(r"thank|thanks|thank you|appreciate"), _thanks),
    (re.compile(r"who are you|what are you"), _identity),
]


def _generic(themes: List[str], continuing: bool, topic: str) -> Reply:
    parts = ["Got it."]
    if continuing:
        parts.append("I remember what we were just discussing, so let's build on it.")
    if themes:
        parts.append(f"I'm picking up on themes like {', '.join(themes)}.")
    parts.append(
        "Here's how we can tackle that: describe the outcome you want, list the "
        "constraints, and we'll map the next move together."
    )
    return Reply(" ".join(parts), topic)


def last_user_message(messages: Sequence[Message]) -> Optional[Message]:
    for m in reversed(messages):
        if m.role == USER:
            return m
    return None


def compose_reply(messages: Sequence[Message], rng=random,
                  now: Optional[datetime.datetime] = None) -> Reply:
    if not messages:
        return Reply(pick_greeting(rng), GENERAL)

    latest = last_user_message(messages)
    if latest is None:
        return Reply(TUNED_IN, GENERAL)

    text = latest.content.strip()
    topic = detect_topic(text)
    if not text:
        return Reply(TAKE_YOUR_TIME, topic)

    normalized = text.lower()
    turn = Turn(topic, rng, now or datetime.datetime.now())
    for pattern, handler in RULES:
        if pattern.search(normalized):
            return handler(turn)

    continuing = any(m.role == ASSISTANT for m in messages)
    return _generic(extract_themes(messages), continuing, topic)
