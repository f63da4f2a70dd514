"""
Tester invites.
"""

from typing import Any

from rbm_helper.capabilities import phone_path
from rbm_helper.transport.http import RbmApi


async def send_tester_invite(api: RbmApi, msisdn: str) -> Any:
    return await api.create_tester(phone_path(msisdn))
