"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from wds.application.notifications import DeliveryNotifier
from wds.domain.model.checkout import PricingPolicy
from wds.domain.model.value_objects import Money
from wds.infrastructure.config import get_settings
from wds.infrastructure.gateways.email_api_mailer import EmailApiMailer
from wds.infrastructure.gateways.hosted_auth import HostedAuthRecoveryLinks
from wds.infrastructure.gateways.snap_payment_gateway import SnapPaymentGateway
from wds.infrastructure.persistence.json_address_repository import (
    JsonAddressRepository,
)
from wds.infrastructure.persistence.json_notification_repository import (
    JsonNotificationRepository,
)
from wds.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from wds.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from wds.infrastructure.persistence.json_profile_repository import (
    JsonProfileRepository,
)
from wds.infrastructure.realtime.order_feed import InMemoryOrderFeed


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_settings().data_dir / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(get_settings().data_dir / "orders.json")


def profile_repository() -> JsonProfileRepository:
    return JsonProfileRepository(get_settings().data_dir / "profiles.json")


def notification_repository() -> JsonNotificationRepository:
    return JsonNotificationRepository(get_settings().data_dir / "notifications.json")


def address_repository() -> JsonAddressRepository:
    return JsonAddressRepository(get_settings().data_dir / "addresses.json")


@lru_cache
def order_feed() -> InMemoryOrderFeed:
    """Process-wide feed; customers get an inbox entry for every change."""
    feed = InMemoryOrderFeed()
    feed.subscribe(DeliveryNotifier(order_repository(), notification_repository()))
    return feed


def pricing_policy() -> PricingPolicy:
    settings = get_settings()
    return PricingPolicy(
        delivery_fee=Money(settings.delivery_fee),
        rental_fee_per_unit=Money(settings.rental_fee_per_gallon),
        rental_cap=settings.rental_cap,
    )


def payment_gateway() -> SnapPaymentGateway:
    settings = get_settings()
    return SnapPaymentGateway(
        api_url=settings.payment_api_url,
        server_key=settings.payment_server_key,
        app_url=settings.app_url,
        timeout=settings.http_timeout,
    )


def recovery_links() -> HostedAuthRecoveryLinks:
    settings = get_settings()
    return HostedAuthRecoveryLinks(
        auth_url=settings.auth_url,
        service_key=settings.auth_service_key,
        timeout=settings.http_timeout,
    )


def mailer() -> EmailApiMailer:
    settings = get_settings()
    return EmailApiMailer(
        api_url=settings.email_api_url,
        api_key=settings.email_api_key,
        sender=settings.email_sender,
        timeout=settings.http_timeout,
    )
