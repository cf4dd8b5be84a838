"""Notification service - account emails behind a narrow notify() capability."""

import html
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Protocol, Tuple

from app.integrations.email_client import EmailClient
from app.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)


class NotificationKind(str, Enum):
    """Emails the account lifecycle can trigger."""
    VERIFY_EMAIL = "verify_email"
    PASSWORD_RESET = "password_reset"
    ACCOUNT_APPROVED = "account_approved"
    ACCOUNT_SUSPENDED = "account_suspended"
    ACCOUNT_BANNED = "account_banned"


@dataclass
class NotificationResult:
    ok: bool
    error: Optional[str] = None


class Notifier(Protocol):
    async def notify(
        self,
        kind: NotificationKind,
        recipient: str,
        template_data: Dict[str, Any],
    ) -> NotificationResult:
        ...


# =============================================================================
# Templates
# =============================================================================

def _layout(title: str, banner_color: str, body_html: str) -> str:
    return f"""<!DOCTYPE html>
<html>
  <head><meta charset="utf-8"><title>{title}</title></head>
  <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
    <div style="background-color: {banner_color}; color: white; padding: 20px; text-align: center; border-radius: 8px 8px 0 0;">
      <h1 style="margin: 0;">{title}</h1>
    </div>
    <div style="background-color: #f8f9fa; padding: 30px; border-radius: 0 0 8px 8px;">
      {body_html}
    </div>
  </body>
</html>"""


def _button(url: str, label: str) -> str:
    return (
        f'<div style="text-align: center; margin: 30px 0;"><a href="{url}" '
        'style="background-color: #102a43; color: white; padding: 12px 30px; '
        f'text-decoration: none; border-radius: 5px; font-weight: bold;">{label}</a></div>'
    )


def render_email(kind: NotificationKind, data: Dict[str, Any]) -> Tuple[str, str, str]:
    """Return (subject, text, html) for a notification."""
    name = data.get("name", "there")
    safe_name = html.escape(name)
    frontend = settings.FRONTEND_URL

    if kind == NotificationKind.VERIFY_EMAIL:
        url = f"{frontend}/verify-email?token={data['token']}"
        text = (
            f"Hi {name},\n\nThank you for signing up! Please verify your email address by visiting:\n"
            f"{url}\n\nThis link will expire in {settings.EMAIL_VERIFICATION_EXPIRE_HOURS} hours. "
            "If you didn't create an account, please ignore this email."
        )
        body = (
            f"<p>Hi {safe_name},</p><p>Thank you for signing up! Please verify your email address:</p>"
            f"{_button(url, 'Verify Email Address')}"
            f"<p style=\"font-size: 12px; color: #666;\">This link will expire in "
            f"{settings.EMAIL_VERIFICATION_EXPIRE_HOURS} hours.</p>"
        )
        return "Verify Your Email Address", text, _layout("Welcome to Maids Services!", "#102a43", body)

    if kind == NotificationKind.PASSWORD_RESET:
        url = f"{frontend}/reset-password?token={data['token']}"
        text = (
            f"Hi {name},\n\nYou requested to reset your password. Visit this link to reset it:\n"
            f"{url}\n\nThis link will expire in {settings.PASSWORD_RESET_EXPIRE_MINUTES} minutes. "
            "If you didn't request a password reset, please ignore this email."
        )
        body = (
            f"<p>Hi {safe_name},</p><p>You requested to reset your password.</p>"
            f"{_button(url, 'Reset Password')}"
            f"<p style=\"font-size: 12px; color: #666;\">This link will expire in "
            f"{settings.PASSWORD_RESET_EXPIRE_MINUTES} minutes.</p>"
        )
        return "Reset Your Password", text, _layout("Password Reset Request", "#102a43", body)

    if kind == NotificationKind.ACCOUNT_APPROVED:
        url = f"{frontend}/login"
        text = (
            f"Hi {name},\n\nGreat news! Your account has been approved by our admin team. "
            f"You can now access all features of our platform.\n\nSign in at: {url}"
        )
        body = (
            f"<p>Hi {safe_name},</p><p>Great news! Your account has been approved by our admin team.</p>"
            f"{_button(url, 'Sign In Now')}"
        )
        return "Your Account Has Been Approved", text, _layout("Account Approved!", "#102a43", body)

    if kind in (NotificationKind.ACCOUNT_SUSPENDED, NotificationKind.ACCOUNT_BANNED):
        banned = kind == NotificationKind.ACCOUNT_BANNED
        verb = "closed" if banned else "suspended"
        reason = data.get("reason")
        text = f"Hi {name},\n\nWe regret to inform you that your account has been {verb}.\n"
        body = f"<p>Hi {safe_name},</p><p>We regret to inform you that your account has been {verb}.</p>"
        if reason:
            text += f"Reason: {reason}\n"
            body += f"<p><strong>Reason:</strong> {html.escape(reason)}</p>"
        text += "\nIf you believe this is an error, please contact our support team."
        body += "<p>If you believe this is an error, please contact our support team.</p>"
        subject = "Account Closure Notice" if banned else "Account Suspension Notice"
        title = "Account Closed" if banned else "Account Suspended"
        return subject, text, _layout(title, "#dc3545", body)

    raise ValueError(f"Unknown notification kind: {kind}")


# =============================================================================
# Email notifier
# =============================================================================

class EmailNotifier:
    """Renders account emails and sends them; never raises."""

    def __init__(self, client: Optional[EmailClient] = None):
        self.client = client or EmailClient()

    async def notify(
        self,
        kind: NotificationKind,
        recipient: str,
        template_data: Dict[str, Any],
    ) -> NotificationResult:
        try:
            subject, text, html_body = render_email(kind, template_data)
            await self.client.send(recipient, subject, text, html_body)
        except Exception as e:
            logger.error("Failed to send %s email to %s: %s", kind.value, recipient, e)
            return NotificationResult(ok=False, error=str(e))
        return NotificationResult(ok=True)


def get_notifier() -> Notifier:
    """FastAPI dependency; overridden in tests."""
    return EmailNotifier()
