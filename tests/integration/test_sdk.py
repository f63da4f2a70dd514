"""
Integration tests for rbm-helper — run against the real RBM API.

Requires environment variables:
  RBM_CREDENTIALS_FILE  — service account key file of an RBM agent
  RBM_TEST_MSISDN       — a tester device registered with the agent

Run: RBM_INTEGRATION=1 pytest tests/integration/ -v
"""

import json
import os
from pathlib import Path

import pytest

from rbm_helper import AsyncRbmHelper, RemoteCallError

SKIP = not os.environ.get("RBM_INTEGRATION")
CREDENTIALS_FILE = os.environ.get("RBM_CREDENTIALS_FILE", "")
MSISDN = os.environ.get("RBM_TEST_MSISDN", "")

pytestmark = pytest.mark.skipif(SKIP, reason="RBM_INTEGRATION not set")


async def make_client() -> AsyncRbmHelper:
    client = AsyncRbmHelper()
    credentials = json.loads(Path(CREDENTIALS_FILE).read_text()) if CREDENTIALS_FILE else None
    await client.initialize(credentials)
    return client


class TestCapability:
    @pytest.mark.asyncio
    async def test_capability_of_tester_device(self):
        client = await make_client()
        result = await client.check_capability(MSISDN)
        assert "features" in result
        await client.close()

    @pytest.mark.asyncio
    async def test_batch_users(self):
        client = await make_client()
        result = await client.get_users([MSISDN])
        assert isinstance(result, dict)
        await client.close()


class TestMessaging:
    @pytest.mark.asyncio
    async def test_send_then_revoke(self):
        client = await make_client()
        await client.send_is_typing(MSISDN)
        sent = await client.send_message(MSISDN, "rbm-helper integration test", message_id=None)
        assert sent["name"].startswith(f"phones/{MSISDN}/agentMessages/")
        message_id = sent["name"].rsplit("/", 1)[-1]
        try:
            await client.revoke_message(MSISDN, message_id)
        except RemoteCallError as e:
            # Already delivered messages cannot be revoked.
            assert e.status_code == 404
        await client.close()

    @pytest.mark.asyncio
    async def test_rich_card(self):
        client = await make_client()
        result = await client.send_rich_card(
            MSISDN,
            "https://storage.googleapis.com/kitchen-sink-sample-images/cute-dog.jpg",
            title="rbm-helper",
            description="integration test card",
        )
        assert "name" in result
        await client.close()


class TestErrorHandling:
    @pytest.mark.asyncio
    async def test_revoke_unknown_message(self):
        client = await make_client()
        with pytest.raises(RemoteCallError):
            await client.revoke_message(MSISDN, "does-not-exist-0000")
        await client.close()
