"""Account lifecycle emails, sent through the SendGrid v3 HTTP API.

Sends are fire-and-forget: they run as background tasks after the response
has gone out, and every failure is logged and dropped.
"""
import logging

import httpx

from . import config

logger = logging.getLogger(__name__)

SENDGRID_URL = "https://api.sendgrid.com/v3/mail/send"
SEND_TIMEOUT = 10.0


def send_email(to: str, subject: str, text: str) -> bool:
    """Send a plain-text email. Returns False if it was not delivered."""
    if not config.SENDGRID_API_KEY:
        logger.info("SENDGRID_API_KEY not set, skipping email %r to %s", subject, to)
        return False

    payload = {
        "personalizations": [{"to": [{"email": to}]}],
        "from": {"email": config.MAIL_FROM},
        "subject": subject,
        "content": [{"type": "text/plain", "value": text}],
    }
    try:
        response = httpx.post(
            SENDGRID_URL,
            json=payload,
            headers={"Authorization": f"Bearer {config.SENDGRID_API_KEY}"},
            timeout=SEND_TIMEOUT,
        )
        response.raise_for_status()
    except Exception:
        logger.exception("Failed to send email %r to %s", subject, to)
        return False
    return True


def send_welcome_email(email: str, name: str) -> bool:
    return send_email(
        email,
        "Thanks for joining in!",
        f"Welcome to the Task Manager app, {name}. Let me know how you get along with the app.",
    )


def send_cancellation_email(email: str, name: str) -> bool:
    return send_email(
        email,
        "Sorry to see you go!",
        f"Goodbye, {name}. We hope to see you back sometime soon!",
    )
