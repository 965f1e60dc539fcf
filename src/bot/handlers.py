"""aiogram message handlers.

Contract: every incoming message gets exactly one reply. Text messages are answered with the
classified intent as a JSON object; empty messages, commands and internal errors get the help text.
"""

from __future__ import annotations

import json
import logging
from time import monotonic

from aiogram.types import Message

from src.app import App
from src.intent.normalize import not_empty
from src.intent.rules_parser import classify
from src.intent.schema import intent_to_payload

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Ask me about movies, for example:\n"
    "- Find a comedy over 7.5 from 2015 to 2020\n"
    "- Find a movie starring Tom Hanks\n"
    '- Tell me about "Inception"'
)


def _is_command_text(text: str) -> bool:
    return text.lstrip().startswith("/")


def render_intent_reply(text: str, *, max_len: int) -> str:
    """Classify `text` and render the intent as pretty-printed JSON."""

    intent = classify(text, max_len=max_len)
    return json.dumps(intent_to_payload(intent), indent=2, ensure_ascii=False)


async def handle_message(message: Message, app: App) -> None:
    """Handle any incoming Telegram message and reply with the intent JSON."""

    started = monotonic()
    reply = HELP_TEXT

    # noinspection PyBroadException
    try:
        raw_text = message.text or message.caption or ""
        if not not_empty(raw_text) or _is_command_text(raw_text):
            await message.answer(HELP_TEXT)
            return

        reply = render_intent_reply(raw_text, max_len=app.settings.sanitize_max_len)

        latency_ms = int((monotonic() - started) * 1000)
        logger.info("handled chars=%d latency_ms=%d", len(raw_text), latency_ms)
    except Exception:
        # Handler boundary: internal errors fall back to the help text without leaking details.
        logger.exception("handler failed")

    await message.answer(reply)
