# server.py
# Flask routes: serve the chat page and the reply API.
from flask import Flask, jsonify, render_template_string, request

from . import settings
from .page import HTML
from .replies import (
    AGENT_NAME,
    FALLBACK_REPLY,
    GENERAL,
    ROLES,
    Message,
    build_suggestions,
    compose_reply,
)

DEFAULT_SUGGESTIONS = [
    "What can you help me with today?",
    "Give me a quick productivity tip",
    "Help me plan my next break",
]

app = Flask(__name__)
app.config.from_object(settings)
app.logger.setLevel(app.config["LOG_LEVEL"])


def parse_messages(data) -> list:
    """Coerce a request body into Messages.

    Anything other than an object with a ``messages`` array counts as an
    empty history. Entries without a known role are dropped.
    """
    if not isinstance(data, dict):
        return []
    raw = data.get("messages")
    if not isinstance(raw, list):
        return []
    messages = []
    for item in raw:
        if not isinstance(item, dict) or item.get("role") not in ROLES:
            continue
        content = item.get("content")
        messages.append(Message(item["role"], content if isinstance(content, str) else ""))
    return messages


# ----------------------------
# Routes
# ----------------------------

@app.route('/')
def index():
    return render_template_string(
        HTML, agent_name=AGENT_NAME, default_suggestions=DEFAULT_SUGGESTIONS
    )


@app.route('/api/chat', methods=['POST'])
def api_chat():
    try:
        # force: the page and curl alike may omit the JSON content type
        data = request.get_json(force=True)
        messages = parse_messages(data)

        reply, topic = compose_reply(messages)
        app.logger.debug("chat: %d messages, topic=%s", len(messages), topic)
        return jsonify({"reply": reply, "suggestions": build_suggestions(topic)})
    except Exception:
        app.logger.exception("chat request failed")
        return jsonify({"reply": FALLBACK_REPLY, "suggestions": build_suggestions(GENERAL)}), 500
