"""
Capability and reachability queries.
"""

from typing import Any

from rbm_helper.ids import new_id
from rbm_helper.transport.http import RbmApi


def phone_path(msisdn: str) -> str:
    return f"phones/{msisdn}"


async def check_capability(api: RbmApi, msisdn: str) -> Any:
    """Synchronous capability check against the device, tagged with a fresh request id."""
    return await api.get_capabilities(phone_path(msisdn), request_id=new_id())


async def get_users(api: RbmApi, msisdns: list[str]) -> Any:
    """Batch reachability check. The API accepts at most 10,000 numbers per call."""
    return await api.batch_get_users(list(msisdns))
