"""Shared doubles: a recording RBM API and a credential provider that never touches Google."""

from typing import Any, Optional

import pytest

from rbm_helper.client import AsyncRbmHelper
from rbm_helper.errors import RemoteCallError


class FakeCredentials:
    valid = True
    token = "fake-token"
    service_account_email = "agent@example.iam.gserviceaccount.com"


class FakeApi:
    """Records every remote call; fails them all when `fail` is set."""

    def __init__(self, credentials: Any, fail: bool = False):
        self.credentials = credentials
        self.fail = fail
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.closed = False

    async def _record(self, name: str, /, **kwargs: Any) -> Any:
        self.calls.append((name, kwargs))
        if self.fail:
            raise RemoteCallError("HTTP 400: bad request", status_code=400, details={"status": "INVALID_ARGUMENT"})
        return {"name": name, **kwargs}

    async def get_capabilities(self, name: str, request_id: str) -> Any:
        return await self._record("get_capabilities", name=name, request_id=request_id)

    async def batch_get_users(self, users: list[str]) -> Any:
        return await self._record("batch_get_users", users=users)

    async def create_tester(self, parent: str) -> Any:
        return await self._record("create_tester", parent=parent)

    async def create_agent_event(self, parent: str, event_id: str, body: dict[str, Any]) -> Any:
        return await self._record("create_agent_event", parent=parent, event_id=event_id, body=body)

    async def create_agent_message(self, parent: str, message_id: str, body: dict[str, Any]) -> Any:
        return await self._record("create_agent_message", parent=parent, message_id=message_id, body=body)

    async def delete_agent_message(self, name: str) -> Any:
        return await self._record("delete_agent_message", name=name)

    async def close(self) -> None:
        self.closed = True


class Harness:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.apis: list[FakeApi] = []
        self.materials: list[Optional[Any]] = []
        self.credentials = FakeCredentials()

    async def credential_provider(self, material: Optional[Any]) -> Any:
        self.materials.append(material)
        return self.credentials

    def api_factory(self, credentials: Any) -> FakeApi:
        api = FakeApi(credentials, fail=self.fail)
        self.apis.append(api)
        return api

    @property
    def api(self) -> FakeApi:
        return self.apis[-1]

    @property
    def call_count(self) -> int:
        return sum(len(api.calls) for api in self.apis)

    def client(self) -> AsyncRbmHelper:
        return AsyncRbmHelper(credential_provider=self.credential_provider, api_factory=self.api_factory)


@pytest.fixture
def harness() -> Harness:
    return Harness()


@pytest.fixture
def failing_harness() -> Harness:
    return Harness(fail=True)
