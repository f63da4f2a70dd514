"""
Agent events — typing indicators and read receipts.
"""

from typing import Any

from rbm_helper.capabilities import phone_path
from rbm_helper.ids import new_id
from rbm_helper.models.intents import IsTypingEvent, ReadEvent
from rbm_helper.payloads import build_event_payload
from rbm_helper.transport.http import RbmApi


async def send_event(api: RbmApi, msisdn: str, intent: Any) -> Any:
    return await api.create_agent_event(phone_path(msisdn), event_id=new_id(), body=build_event_payload(intent))


async def send_is_typing(api: RbmApi, msisdn: str) -> Any:
    return await send_event(api, msisdn, IsTypingEvent())


async def send_read(api: RbmApi, msisdn: str, message_id: str) -> Any:
    return await send_event(api, msisdn, ReadEvent(message_id=message_id))
