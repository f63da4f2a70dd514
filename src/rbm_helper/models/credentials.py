"""
Service-account credential material.

Accepts either the short form ``{"identity": ..., "privateKey": ...}`` or a
full service-account key file as downloaded from the Cloud console.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field

DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"


class ServiceAccountCredential(BaseModel):
    client_email: str = Field(alias="identity")
    private_key: str = Field(alias="privateKey")
    token_uri: str = DEFAULT_TOKEN_URI
    private_key_id: Optional[str] = None
    project_id: Optional[str] = None

    model_config = {"populate_by_name": True, "extra": "ignore"}

    def to_info(self) -> dict[str, Any]:
        """Dict in the shape google-auth expects for a service-account key."""
        info: dict[str, Any] = {
            "type": "service_account",
            "client_email": self.client_email,
            "private_key": self.private_key,
            "token_uri": self.token_uri,
        }
        if self.private_key_id:
            info["private_key_id"] = self.private_key_id
        if self.project_id:
            info["project_id"] = self.project_id
        return info
