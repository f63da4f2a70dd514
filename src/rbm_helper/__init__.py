"""
rbm-helper — RCS Business Messaging helper for Python.

Builds RBM agent messages, rich cards, carousels and agent events and sends
them to the RBM REST API using Google service-account or ambient credentials.
"""

from rbm_helper.client import RbmHelper, AsyncRbmHelper
from rbm_helper.auth import RBM_SCOPE
from rbm_helper.errors import RbmError, NotInitializedError, AuthError, RemoteCallError
from rbm_helper.models.credentials import ServiceAccountCredential
from rbm_helper.models.intents import (
    CardWidth,
    CarouselCard,
    IsTypingEvent,
    ReadEvent,
    StandaloneRichCard,
    TextMessage,
)
from rbm_helper.models.suggestions import CardContent, SuggestedAction, SuggestedReply

__version__ = "0.1.0"
__all__ = [
    "RbmHelper",
    "AsyncRbmHelper",
    "RBM_SCOPE",
    "RbmError",
    "NotInitializedError",
    "AuthError",
    "RemoteCallError",
    "ServiceAccountCredential",
    "CardWidth",
    "CarouselCard",
    "IsTypingEvent",
    "ReadEvent",
    "StandaloneRichCard",
    "TextMessage",
    "CardContent",
    "SuggestedAction",
    "SuggestedReply",
]
