"""Identifier generation for messages, events and capability requests."""

import uuid


def new_id() -> str:
    return str(uuid.uuid4())
