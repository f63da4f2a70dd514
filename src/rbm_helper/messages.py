"""
Agent messages — send and revoke.
"""

from typing import Any, Optional

from rbm_helper.capabilities import phone_path
from rbm_helper.ids import new_id
from rbm_helper.payloads import build_message_payload
from rbm_helper.transport.http import RbmApi


def message_path(msisdn: str, message_id: str) -> str:
    return f"{phone_path(msisdn)}/agentMessages/{message_id}"


async def send(api: RbmApi, msisdn: str, intent: Any, message_id: Optional[str] = None) -> Any:
    """Send any MessageIntent. A message id is generated unless one is given."""
    body = build_message_payload(intent)
    return await api.create_agent_message(phone_path(msisdn), message_id=message_id or new_id(), body=body)


async def revoke_message(api: RbmApi, msisdn: str, message_id: str) -> Any:
    """Stop a message that has not been delivered yet."""
    return await api.delete_agent_message(message_path(msisdn, message_id))
