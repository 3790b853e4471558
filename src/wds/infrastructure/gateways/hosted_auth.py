"""RecoveryLinkIssuer backed by the hosted auth provider's admin API."""

from __future__ import annotations

import httpx

from wds.domain.exceptions import UpstreamUnavailable
from wds.domain.gateway.account_gateway import RecoveryLinkIssuer
from wds.infrastructure.gateways.http_client import post_json


class HostedAuthRecoveryLinks(RecoveryLinkIssuer):

    def __init__(
        self,
        auth_url: str,
        service_key: str,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._endpoint = f"{auth_url.rstrip('/')}/auth/v1/admin/generate_link"
        self._headers = {
            "apikey": service_key,
            "Authorization": f"Bearer {service_key}",
        }
        self._client = client or httpx.Client(timeout=timeout)

    def generate_recovery_link(self, email: str, redirect_to: str) -> str:
        body = post_json(
            self._client,
            "Auth provider",
            self._endpoint,
            {"type": "recovery", "email": email, "redirect_to": redirect_to},
            headers=self._headers,
        )
        link = body.get("action_link") or body.get("properties", {}).get("action_link")
        if not link:
            raise UpstreamUnavailable("Auth provider returned no recovery link")
        return link
