"""Mailer backed by a transactional email REST API."""

from __future__ import annotations

import httpx

from wds.domain.gateway.account_gateway import Mailer
from wds.infrastructure.gateways.http_client import post_json


class EmailApiMailer(Mailer):

    def __init__(
        self,
        api_url: str,
        api_key: str,
        sender: str,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._api_url = api_url
        self._sender = sender
        self._headers = {"Authorization": f"Bearer {api_key}"}
        self._client = client or httpx.Client(timeout=timeout)

    def send(self, recipient: str, subject: str, html: str) -> None:
        post_json(
            self._client,
            "Email provider",
            self._api_url,
            {"from": self._sender, "to": [recipient], "subject": subject, "html": html},
            headers=self._headers,
        )
