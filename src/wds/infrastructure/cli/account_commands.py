"""CLI commands for profiles, notifications, payments and account recovery."""

from __future__ import annotations

import click

from wds.application.create_transaction import CreateTransactionHandler
from wds.application.manage_profile import SaveProfileHandler, ShowProfileHandler
from wds.application.notifications import (
    ListNotificationsHandler,
    MarkNotificationsReadHandler,
)
from wds.application.reset_password import RequestPasswordResetHandler
from wds.domain.exceptions import DomainException
from wds.domain.gateway.payment_gateway import CustomerDetails
from wds.domain.model.order_status import ActorRole
from wds.infrastructure.bootstrap import (
    mailer,
    notification_repository,
    payment_gateway,
    profile_repository,
    recovery_links,
)
from wds.infrastructure.config import get_settings


# --- Profile ----------------------------------------------------------------


@click.command("show")
@click.option("--id", "user_id", required=True, help="User ID.")
def profile_show(user_id: str) -> None:
    """Show a user's profile."""
    try:
        profile = ShowProfileHandler(profile_repository()).handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{profile.full_name} ({profile.role.value})")
    click.echo(f"Email:   {profile.email or '-'}")
    click.echo(f"Phone:   {profile.phone or '-'}")
    click.echo(f"Address: {profile.address or '-'}")
    if profile.role == ActorRole.DRIVER:
        click.echo(f"Vehicle: {profile.vehicle_number or '-'}")
    if profile.avatar_url:
        click.echo(f"Avatar:  {profile.avatar_url}")


@click.command("set")
@click.option("--id", "user_id", required=True, help="User ID.")
@click.option("--name", default=None, help="Full name.")
@click.option("--address", default=None, help="Delivery address.")
@click.option("--phone", default=None, help="Phone number.")
@click.option("--email", default=None, help="Email address.")
@click.option("--vehicle", default=None, help="Vehicle plate number (drivers only).")
@click.option("--avatar-url", default=None, help="Profile picture URL.")
@click.option(
    "--role",
    type=click.Choice([r.value for r in ActorRole]),
    default=None,
    help="Role, only when creating the profile.",
)
def profile_set(
    user_id: str,
    name: str | None,
    address: str | None,
    phone: str | None,
    email: str | None,
    vehicle: str | None,
    avatar_url: str | None,
    role: str | None,
) -> None:
    """Create or update a profile."""
    handler = SaveProfileHandler(profile_repository())
    try:
        profile = handler.handle(
            user_id,
            full_name=name,
            address=address,
            phone=phone,
            role=ActorRole(role) if role else None,
            email=email,
            vehicle_number=vehicle,
            avatar_url=avatar_url,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Profile '{profile.id}' saved.")


# --- Notifications ----------------------------------------------------------


@click.command("list")
@click.option("--user", "user_id", required=True, help="User ID.")
def notification_list(user_id: str) -> None:
    """Show a user's notifications, newest first."""
    notifications = ListNotificationsHandler(notification_repository()).handle(user_id)
    if not notifications:
        click.echo("No notifications.")
        return
    unread = sum(1 for n in notifications if not n.read)
    click.echo(f"{unread} unread")
    for n in notifications:
        marker = " " if n.read else "*"
        click.echo(f"{marker} {n.time:%Y-%m-%d %H:%M} [{n.type.value}] {n.title}: {n.message}")


@click.command("read-all")
@click.option("--user", "user_id", required=True, help="User ID.")
def notification_read_all(user_id: str) -> None:
    """Mark all notifications as read."""
    count = MarkNotificationsReadHandler(notification_repository()).handle(user_id)
    click.echo(f"{count} notification(s) marked as read.")


# --- Payment gateway proxy --------------------------------------------------


@click.command("create-transaction")
@click.option("--order-id", required=True, help="Merchant order reference.")
@click.option("--amount", required=True, type=int, help="Gross amount in rupiah.")
@click.option("--name", required=True, help="Customer first name.")
@click.option("--email", default=None, help="Customer email.")
def payment_create_transaction(order_id: str, amount: int, name: str, email: str | None) -> None:
    """Register a card transaction and print its token."""
    handler = CreateTransactionHandler(payment_gateway())
    try:
        transaction = handler.handle(
            order_id, amount, CustomerDetails(first_name=name, email=email)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"token: {transaction.token}")
    if transaction.redirect_url:
        click.echo(f"redirect_url: {transaction.redirect_url}")


# --- Account recovery -------------------------------------------------------


@click.command("reset-password")
@click.option("--email", required=True, help="Account email.")
def account_reset_password(email: str) -> None:
    """Email a password-reset link."""
    handler = RequestPasswordResetHandler(
        link_issuer=recovery_links(),
        mailer=mailer(),
        app_url=get_settings().app_url,
    )
    try:
        handler.handle(email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Password reset email sent.")
