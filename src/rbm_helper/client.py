"""
RbmHelper / AsyncRbmHelper — main client entry points.
"""

import asyncio
from typing import Any, Optional, Union

from rbm_helper import capabilities, events, messages, testers
from rbm_helper.auth import ApiFactory, Auth, AuthSession, CredentialMaterial, CredentialProvider, load_credentials
from rbm_helper.models.intents import (
    DEFAULT_CARD_WIDTH,
    CardWidth,
    CarouselCard,
    StandaloneRichCard,
    TextMessage,
)
from rbm_helper.models.suggestions import Suggestion
from rbm_helper.transport.http import DEFAULT_BASE_URL, RbmApi


class AsyncRbmHelper:
    """Async RBM client (primary).

    Call initialize() once before anything else; every other operation raises
    NotInitializedError until it has completed.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        credential_provider: CredentialProvider = load_credentials,
        api_factory: Optional[ApiFactory] = None,
    ):
        self._base_url = base_url
        self._timeout = timeout
        self.auth = Auth(api_factory or self._build_api, credential_provider=credential_provider)

    def _build_api(self, credentials: Any) -> RbmApi:
        return RbmApi(credentials, base_url=self._base_url, timeout=self._timeout)

    @property
    def initialized(self) -> bool:
        return self.auth.initialized

    async def initialize(self, credentials: Optional[CredentialMaterial] = None) -> None:
        """Authenticate with service account material, or ambient credentials when omitted."""
        await self.auth.initialize(credentials)

    async def close(self) -> None:
        await self.auth.close()

    def _session(self) -> AuthSession:
        return self.auth.require_initialized()

    async def check_capability(self, msisdn: str) -> Any:
        """Check whether the device supports RBM."""
        session = self._session()
        return await capabilities.check_capability(session.api, msisdn)

    async def get_users(self, msisdns: list[str]) -> Any:
        """Batch reachability check for up to 10,000 numbers."""
        session = self._session()
        return await capabilities.get_users(session.api, msisdns)

    async def send_tester_invite(self, msisdn: str) -> Any:
        session = self._session()
        return await testers.send_tester_invite(session.api, msisdn)

    async def send_is_typing(self, msisdn: str) -> Any:
        session = self._session()
        return await events.send_is_typing(session.api, msisdn)

    async def send_read(self, msisdn: str, message_id: str) -> Any:
        session = self._session()
        return await events.send_read(session.api, msisdn, message_id)

    async def revoke_message(self, msisdn: str, message_id: str) -> Any:
        session = self._session()
        return await messages.revoke_message(session.api, msisdn, message_id)

    async def send(self, msisdn: str, intent: Any, message_id: Optional[str] = None) -> Any:
        """Send a prepared TextMessage, StandaloneRichCard or CarouselCard."""
        session = self._session()
        return await messages.send(session.api, msisdn, intent, message_id=message_id)

    async def send_message(
        self,
        msisdn: str,
        text: Optional[str] = None,
        *,
        suggestions: Optional[list[Suggestion]] = None,
        file_url: Optional[str] = None,
        message_id: Optional[str] = None,
    ) -> Any:
        """Send text, suggestion chips and/or a media file."""
        self._session()
        intent = TextMessage(text=text, suggestions=suggestions or [], file_url=file_url)
        return await self.send(msisdn, intent, message_id=message_id)

    async def send_rich_card(
        self,
        msisdn: str,
        image_url: str,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        suggestions: Optional[list[Suggestion]] = None,
        message_id: Optional[str] = None,
    ) -> Any:
        """Send a standalone vertical rich card with a tall image."""
        self._session()
        intent = StandaloneRichCard(
            image_url=image_url,
            title=title or "",
            description=description or "",
            suggestions=suggestions or [],
        )
        return await self.send(msisdn, intent, message_id=message_id)

    async def send_carousel_card(
        self,
        msisdn: str,
        card_contents: list[Any],
        *,
        card_width: Optional[Union[str, CardWidth]] = None,
        message_id: Optional[str] = None,
    ) -> Any:
        """Send a carousel. Card contents are forwarded without validation."""
        self._session()
        intent = CarouselCard(card_width=card_width or DEFAULT_CARD_WIDTH, card_contents=card_contents)
        return await self.send(msisdn, intent, message_id=message_id)


class RbmHelper:
    """Sync wrapper around AsyncRbmHelper. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncRbmHelper(**kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def initialized(self) -> bool:
        return self._async.initialized

    def initialize(self, credentials: Optional[CredentialMaterial] = None) -> None:
        self._run(self._async.initialize(credentials))

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()

    def check_capability(self, msisdn: str) -> Any:
        return self._run(self._async.check_capability(msisdn))

    def get_users(self, msisdns: list[str]) -> Any:
        return self._run(self._async.get_users(msisdns))

    def send_tester_invite(self, msisdn: str) -> Any:
        return self._run(self._async.send_tester_invite(msisdn))

    def send_is_typing(self, msisdn: str) -> Any:
        return self._run(self._async.send_is_typing(msisdn))

    def send_read(self, msisdn: str, message_id: str) -> Any:
        return self._run(self._async.send_read(msisdn, message_id))

    def revoke_message(self, msisdn: str, message_id: str) -> Any:
        return self._run(self._async.revoke_message(msisdn, message_id))

    def send(self, msisdn: str, intent: Any, message_id: Optional[str] = None) -> Any:
        return self._run(self._async.send(msisdn, intent, message_id=message_id))

    def send_message(self, msisdn: str, text: Optional[str] = None, **kwargs: Any) -> Any:
        return self._run(self._async.send_message(msisdn, text, **kwargs))

    def send_rich_card(self, msisdn: str, image_url: str, **kwargs: Any) -> Any:
        return self._run(self._async.send_rich_card(msisdn, image_url, **kwargs))

    def send_carousel_card(self, msisdn: str, card_contents: list[Any], **kwargs: Any) -> Any:
        return self._run(self._async.send_carousel_card(msisdn, card_contents, **kwargs))
