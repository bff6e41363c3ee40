"""Lumen: a small rule-based chat companion served by Flask."""

from .replies import (
    AGENT_NAME,
    Message,
    Reply,
    build_suggestions,
    compose_reply,
    detect_topic,
    extract_themes,
)

__version__ = "0.1.0"

__all__ = [
    "AGENT_NAME",
    "Message",
    "Reply",
    "build_suggestions",
    "compose_reply",
    "detect_topic",
    "extract_themes",
]
