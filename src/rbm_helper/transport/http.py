"""
REST client for the RBM API — the remote-invoke side of every operation.

Requests carry a bearer token taken from google-auth credentials; the token is
refreshed in a worker thread whenever the credentials report it invalid.
"""

import asyncio
import logging
import os
from typing import Any, Optional

import google.auth.exceptions
import google.auth.transport.requests
import httpx

from rbm_helper.errors import AuthError, RemoteCallError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = os.environ.get("RBM_BASE_URL", "https://rcsbusinessmessaging.googleapis.com")
API_VERSION = "v1"


class RbmApi:
    def __init__(
        self,
        credentials: Any,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.credentials = credentials
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=f"{self._base_url}/{API_VERSION}",
            headers={"User-Agent": "rbm-helper/0.1.0", "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    async def _access_token(self) -> str:
        if not self.credentials.valid:
            try:
                await asyncio.to_thread(self.credentials.refresh, google.auth.transport.requests.Request())
            except google.auth.exceptions.GoogleAuthError as e:
                raise AuthError(f"Failed to refresh access token: {e}") from e
        return self.credentials.token

    @staticmethod
    def _error_details(resp: httpx.Response) -> Optional[dict[str, Any]]:
        """Google APIs wrap failures as { "error": { "code", "message", "status" } }"""
        try:
            body = resp.json()
        except ValueError:
            return None
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            return body["error"]
        return None

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, str]] = None,
    ) -> Any:
        headers = {"Authorization": f"Bearer {await self._access_token()}"}
        logger.debug("%s %s params=%s", method, path, params)
        try:
            resp = await self._client.request(method, path, json=body, params=params, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise RemoteCallError(f"{method} {path} failed: {e}") from e
        if resp.status_code >= 400:
            logger.warning("%s %s returned HTTP %s", method, path, resp.status_code)
            raise RemoteCallError(
                f"HTTP {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
                details=self._error_details(resp),
            )
        if not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError as e:
            raise RemoteCallError(
                f"{method} {path} returned a non-JSON body: {resp.text[:200]}",
                status_code=resp.status_code,
            ) from e

    async def get_capabilities(self, name: str, request_id: str) -> Any:
        return await self._request("GET", f"/{name}/capabilities", params={"requestId": request_id})

    async def batch_get_users(self, users: list[str]) -> Any:
        return await self._request("POST", "/users:batchGet", {"users": users})

    async def create_tester(self, parent: str) -> Any:
        return await self._request("POST", f"/{parent}/testers", {})

    async def create_agent_event(self, parent: str, event_id: str, body: dict[str, Any]) -> Any:
        return await self._request("POST", f"/{parent}/agentEvents", body, params={"eventId": event_id})

    async def create_agent_message(self, parent: str, message_id: str, body: dict[str, Any]) -> Any:
        return await self._request("POST", f"/{parent}/agentMessages", body, params={"messageId": message_id})

    async def delete_agent_message(self, name: str) -> Any:
        return await self._request("DELETE", f"/{name}")

    async def close(self) -> None:
        await self._client.aclose()
