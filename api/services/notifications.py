"""Submission notifications.

No mail transport is configured; notifications are composed and written to
the log so an operator (or a log shipper) can act on them. A failure here
never fails the submission that triggered it.
"""

from dataclasses import dataclass

from api.config import get_settings
from config.logging_config import get_logger

logger = get_logger("api.notifications")


@dataclass
class Notification:
    """One outgoing message."""

    to: str
    subject: str
    body: str


def admin_submission_notice(supplier: dict) -> Notification:
    settings = get_settings()
    lines = [
        "A new supplier has been submitted for review.",
        f"Name: {supplier['name']}",
        f"Website: {supplier.get('website_url') or 'Not provided'}",
        f"Email: {supplier.get('contact_email') or 'Not provided'}",
        f"Phone: {supplier.get('contact_phone') or 'Not provided'}",
        f"Location: {supplier.get('location') or 'Not provided'}",
        f"Accepts quotes: {'Yes' if supplier.get('accepts_quotes') else 'No'}",
        f"Has discount: {'Yes' if supplier.get('has_discount') else 'No'}",
        f"Review: {settings.site_url}/admin/suppliers?status=pending",
    ]
    return Notification(
        to=settings.admin_email,
        subject=f"New Supplier Submission: {supplier['name']}",
        body="\n".join(lines),
    )


def supplier_confirmation(supplier: dict, email: str) -> Notification:
    settings = get_settings()
    lines = [
        f"We've received your submission for {supplier['name']} and it's now under review.",
        "Our team will review your submission within 2-3 business days.",
        f"Submission ID: {supplier['id']}",
        f"Questions? {settings.site_url}/contact",
    ]
    return Notification(
        to=email,
        subject=f"Submission Received: {supplier['name']}",
        body="\n".join(lines),
    )


def send(notification: Notification) -> None:
    logger.info(f"Notification to {notification.to}: {notification.subject}")
    logger.debug(notification.body)


def notify_submission(supplier: dict, contact_email: str) -> list[Notification]:
    """Send the admin notice and the submitter's confirmation.

    Returns:
        Notifications that were sent.
    """
    sent = []
    for notification in (
        admin_submission_notice(supplier),
        supplier_confirmation(supplier, contact_email),
    ):
        try:
            send(notification)
            sent.append(notification)
        except Exception as e:
            logger.error(f"Failed to send notification '{notification.subject}': {e}")
    return sent
