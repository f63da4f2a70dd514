"""
Auth session — credential loading and the initialization gate.

Credentials come from explicit service-account material, or from the ambient
Application Default Credentials when none is given. A session is published
only once both the credentials and the API client bound to them exist.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Union

import google.auth
import google.auth.exceptions
from google.oauth2 import service_account
from pydantic import ValidationError

from rbm_helper.errors import AuthError, NotInitializedError
from rbm_helper.models.credentials import ServiceAccountCredential
from rbm_helper.transport.http import RbmApi

logger = logging.getLogger(__name__)

RBM_SCOPE = "https://www.googleapis.com/auth/rcsbusinessmessaging"

CredentialMaterial = Union[ServiceAccountCredential, dict[str, Any]]
CredentialProvider = Callable[[Optional[ServiceAccountCredential]], Awaitable[Any]]
ApiFactory = Callable[[Any], RbmApi]


def parse_credential_material(material: CredentialMaterial) -> ServiceAccountCredential:
    if isinstance(material, ServiceAccountCredential):
        return material
    try:
        return ServiceAccountCredential.model_validate(material)
    except ValidationError as e:
        raise AuthError(f"Invalid service account credentials: {e}") from e


async def load_credentials(material: Optional[ServiceAccountCredential] = None) -> Any:
    """Obtain google-auth credentials scoped to the RBM API."""
    if material is None:
        try:
            credentials, _ = await asyncio.to_thread(google.auth.default, scopes=[RBM_SCOPE])
        except google.auth.exceptions.DefaultCredentialsError as e:
            raise AuthError(f"No ambient credentials available: {e}") from e
        return credentials
    try:
        return service_account.Credentials.from_service_account_info(material.to_info(), scopes=[RBM_SCOPE])
    except ValueError as e:
        raise AuthError(f"Failed to load service account {material.client_email}: {e}") from e


class AuthSession:
    """An initialized session: credentials plus the API client bound to them."""

    __slots__ = ("credentials", "api")

    def __init__(self, credentials: Any, api: RbmApi):
        self.credentials = credentials
        self.api = api

    def __repr__(self) -> str:
        identity = getattr(self.credentials, "service_account_email", None)
        return f"AuthSession(identity={identity!r})"


class Auth:
    def __init__(
        self,
        api_factory: ApiFactory,
        credential_provider: CredentialProvider = load_credentials,
    ):
        self._api_factory = api_factory
        self._credential_provider = credential_provider
        self._session: Optional[AuthSession] = None
        self._pending: Optional[asyncio.Task] = None
        self._replaced: list[RbmApi] = []

    @property
    def initialized(self) -> bool:
        return self._session is not None

    async def initialize(self, credentials: Optional[CredentialMaterial] = None) -> AuthSession:
        """Create the session, replacing any previous one.

        Calls made while an initialization is already running join it rather
        than starting a second one.
        """
        if self._pending is not None and not self._pending.done():
            return await asyncio.shield(self._pending)
        material = parse_credential_material(credentials) if credentials is not None else None
        self._pending = asyncio.ensure_future(self._initialize(material))
        return await asyncio.shield(self._pending)

    async def _initialize(self, material: Optional[ServiceAccountCredential]) -> AuthSession:
        creds = await self._credential_provider(material)
        session = AuthSession(creds, self._api_factory(creds))
        if self._session is not None:
            # in-flight calls may still hold the old client
            self._replaced.append(self._session.api)
        self._session = session
        if material is None:
            logger.info("RBM session initialized from ambient credentials")
        else:
            logger.info("RBM session initialized for %s", material.client_email)
        return session

    def require_initialized(self) -> AuthSession:
        if self._session is None:
            raise NotInitializedError()
        return self._session

    async def close(self) -> None:
        """Close every API client this gate has built and return to uninitialized."""
        if self._pending is not None and not self._pending.done():
            await asyncio.wait({self._pending})
        apis, self._replaced = self._replaced, []
        if self._session is not None:
            apis.append(self._session.api)
            self._session = None
        for api in apis:
            await api.close()
