"""Abstract collaborators used by the account-recovery flow."""

from __future__ import annotations

from abc import ABC, abstractmethod


class RecoveryLinkIssuer(ABC):

    @abstractmethod
    def generate_recovery_link(self, email: str, redirect_to: str) -> str:
        """Ask the auth provider for a one-time password-reset link."""


class Mailer(ABC):

    @abstractmethod
    def send(self, recipient: str, subject: str, html: str) -> None:
        """Send a transactional email."""
