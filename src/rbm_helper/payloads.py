"""
Payload builders — turn send intents into RBM API request bodies.

Builders are pure: no ids, no addressing. Message and event ids travel in the
request query string, never inside the body.
"""

from typing import Any

from rbm_helper.models.intents import (
    CardWidth,
    CarouselCard,
    IsTypingEvent,
    ReadEvent,
    StandaloneRichCard,
    TextMessage,
)
from rbm_helper.models.suggestions import CardContent, suggestion_payload

CARD_ORIENTATION = "VERTICAL"
MEDIA_HEIGHT = "TALL"


def _suggestions(intent: Any) -> list[dict[str, Any]]:
    return [suggestion_payload(s) for s in intent.suggestions]


def build_text_payload(intent: TextMessage) -> dict[str, Any]:
    content: dict[str, Any] = {}
    if intent.text:
        content["text"] = intent.text
    if intent.suggestions:
        content["suggestions"] = _suggestions(intent)
    if intent.file_url is not None:
        content["contentInfo"] = {"fileUrl": intent.file_url}
    return {"contentMessage": content}


def build_standalone_card_payload(intent: StandaloneRichCard) -> dict[str, Any]:
    card_content: dict[str, Any] = {
        "media": {
            "height": MEDIA_HEIGHT,
            "contentInfo": {"fileUrl": intent.image_url, "forceRefresh": False},
        },
        "title": intent.title,
        "description": intent.description,
    }
    if intent.suggestions:
        card_content["suggestions"] = _suggestions(intent)
    return {
        "contentMessage": {
            "richCard": {
                "standaloneCard": {
                    "cardOrientation": CARD_ORIENTATION,
                    "cardContent": card_content,
                },
            },
        },
    }


def build_carousel_payload(intent: CarouselCard) -> dict[str, Any]:
    contents = [c.to_payload() if isinstance(c, CardContent) else c for c in intent.card_contents]
    width = intent.card_width.value if isinstance(intent.card_width, CardWidth) else intent.card_width
    return {
        "contentMessage": {
            "richCard": {
                "carouselCard": {
                    "cardWidth": width,
                    "cardContents": contents,
                },
            },
        },
    }


def build_is_typing_payload(intent: IsTypingEvent) -> dict[str, Any]:
    return {"eventType": "IS_TYPING"}


def build_read_payload(intent: ReadEvent) -> dict[str, Any]:
    return {"eventType": "READ", "messageId": intent.message_id}


def build_message_payload(intent: Any) -> dict[str, Any]:
    """Dispatch a MessageIntent to its builder."""
    if isinstance(intent, TextMessage):
        return build_text_payload(intent)
    if isinstance(intent, StandaloneRichCard):
        return build_standalone_card_payload(intent)
    if isinstance(intent, CarouselCard):
        return build_carousel_payload(intent)
    raise TypeError(f"Not a message intent: {type(intent).__name__}")


def build_event_payload(intent: Any) -> dict[str, Any]:
    """Dispatch an EventIntent to its builder."""
    if isinstance(intent, IsTypingEvent):
        return build_is_typing_payload(intent)
    if isinstance(intent, ReadEvent):
        return build_read_payload(intent)
    raise TypeError(f"Not an event intent: {type(intent).__name__}")
