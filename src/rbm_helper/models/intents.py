"""
Send intents — what a caller wants delivered to a phone.

Each variant carries only the fields relevant to it; the payload builders in
rbm_helper.payloads turn them into wire bodies.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, Field

from rbm_helper.models.suggestions import Suggestion


class CardWidth(str, Enum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"


DEFAULT_CARD_WIDTH = CardWidth.MEDIUM


class TextMessage(BaseModel):
    kind: Literal["text"] = "text"
    text: Optional[str] = None
    suggestions: list[Suggestion] = Field(default_factory=list)
    file_url: Optional[str] = None


class StandaloneRichCard(BaseModel):
    kind: Literal["standalone_card"] = "standalone_card"
    image_url: str
    title: str = ""
    description: str = ""
    suggestions: list[Suggestion] = Field(default_factory=list)


class CarouselCard(BaseModel):
    kind: Literal["carousel_card"] = "carousel_card"
    card_width: Union[CardWidth, str] = DEFAULT_CARD_WIDTH
    card_contents: list[Any]


class IsTypingEvent(BaseModel):
    kind: Literal["is_typing"] = "is_typing"


class ReadEvent(BaseModel):
    kind: Literal["read"] = "read"
    message_id: str


MessageIntent = Annotated[
    Union[TextMessage, StandaloneRichCard, CarouselCard],
    Field(discriminator="kind"),
]

EventIntent = Annotated[
    Union[IsTypingEvent, ReadEvent],
    Field(discriminator="kind"),
]
