"""Application service: Request Password Reset use case."""

from __future__ import annotations

import logging

from wds.domain.exceptions import ValidationError
from wds.domain.gateway.account_gateway import Mailer, RecoveryLinkIssuer

logger = logging.getLogger(__name__)

SUBJECT = "Reset Kata Sandi Akun AirGalon Anda"

TEMPLATE = """\
<h1>Reset Kata Sandi Anda</h1>
<p>Anda menerima email ini karena ada permintaan untuk mereset kata sandi akun Anda.</p>
<p>Klik tautan di bawah ini untuk melanjutkan:</p>
<a href="{link}">Reset Kata Sandi</a>
<p>Jika Anda tidak merasa meminta ini, abaikan saja email ini.</p>
<p>Tautan ini akan kedaluwarsa dalam 1 jam.</p>
"""


class RequestPasswordResetHandler:

    def __init__(
        self,
        link_issuer: RecoveryLinkIssuer,
        mailer: Mailer,
        app_url: str,
    ) -> None:
        self._link_issuer = link_issuer
        self._mailer = mailer
        self._app_url = app_url.rstrip("/")

    def handle(self, email: str) -> None:
        if not email or not email.strip():
            raise ValidationError("Email is required")
        email = email.strip()

        link = self._link_issuer.generate_recovery_link(
            email, redirect_to=f"{self._app_url}/update-password"
        )
        self._mailer.send(email, SUBJECT, TEMPLATE.format(link=link))
        logger.info("Password reset email sent to %s", email)
