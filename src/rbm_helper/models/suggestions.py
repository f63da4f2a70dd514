"""
Helpers for suggestion chips and carousel cards.

Raw wire dicts are accepted everywhere these models are; the models only save
callers from spelling out the nested camelCase structure by hand.
"""

from __future__ import annotations

from typing import Any, Optional, Union
from pydantic import BaseModel, Field


class SuggestedReply(BaseModel):
    text: str
    postback_data: str

    def to_payload(self) -> dict[str, Any]:
        return {"reply": {"text": self.text, "postbackData": self.postback_data}}


class SuggestedAction(BaseModel):
    """Suggested action chip. Set exactly one of open_url / dial_phone_number."""
    text: str
    postback_data: str
    open_url: Optional[str] = None
    dial_phone_number: Optional[str] = None
    fallback_url: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        action: dict[str, Any] = {"text": self.text, "postbackData": self.postback_data}
        if self.fallback_url:
            action["fallbackUrl"] = self.fallback_url
        if self.open_url:
            action["openUrlAction"] = {"url": self.open_url}
        if self.dial_phone_number:
            action["dialAction"] = {"phoneNumber": self.dial_phone_number}
        return {"action": action}


Suggestion = Union[dict[str, Any], SuggestedReply, SuggestedAction]


def suggestion_payload(suggestion: Suggestion) -> dict[str, Any]:
    if isinstance(suggestion, (SuggestedReply, SuggestedAction)):
        return suggestion.to_payload()
    return suggestion


class CardContent(BaseModel):
    """One card of a carousel."""
    image_url: str
    title: str = ""
    description: str = ""
    height: str = "MEDIUM"
    suggestions: list[Suggestion] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        content: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "media": {
                "height": self.height,
                "contentInfo": {"fileUrl": self.image_url, "forceRefresh": False},
            },
        }
        if self.suggestions:
            content["suggestions"] = [suggestion_payload(s) for s in self.suggestions]
        return content
