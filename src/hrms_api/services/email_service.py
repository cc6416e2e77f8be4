"""Email service for sending account credentials over SMTP."""

import asyncio
import logging
import re
import smtplib
import ssl
from concurrent.futures import ThreadPoolExecutor
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formatdate, make_msgid
from functools import partial
from html import escape as html_escape

from hrms_api.config import Settings, get_settings
from hrms_api.exceptions import EmailDeliveryError
from hrms_api.utils.secure_logging import log_error, mask_email

logger = logging.getLogger(__name__)

# Thread pool for non-blocking SMTP operations
_smtp_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="smtp")

# Email texts keyed by template
EMAIL_TEXTS: dict[str, dict[str, str]] = {
    "welcome": {
        "subject": "{system_name} - Your Account Has Been Created",
        "heading": "Welcome to {system_name}",
        "intro": "An employee record and login account have been created for you. "
        "Please use the following credentials to log in:",
        "password_label": "Temporary Password",
        "warning": "Please change this password after your first login.",
    },
    "reset": {
        "subject": "{system_name} - Your Login Credentials",
        "heading": "Your Login Credentials",
        "intro": "A new password has been issued for your account. "
        "Please use the following credentials to log in:",
        "password_label": "New Temporary Password",
        "warning": "Any password sent to you earlier no longer works.",
    },
}


class EmailService:
    """Service for sending emails via SMTP."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize email service from application settings."""
        self.settings = settings or get_settings()

    @property
    def is_configured(self) -> bool:
        """Check if SMTP is configured."""
        return self.settings.smtp_configured

    def _get_smtp_connection(self) -> smtplib.SMTP | smtplib.SMTP_SSL:
        """Create an authenticated SMTP connection.

        Returns:
            SMTP connection
        """
        settings = self.settings
        context = ssl.create_default_context()
        timeout = settings.smtp_timeout_seconds

        if settings.smtp_use_tls:
            # Use STARTTLS (port 587 typically)
            smtp = smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=timeout)
            # EHLO before STARTTLS for proper server greeting
            smtp.ehlo()
            smtp.starttls(context=context)
            # EHLO again after STARTTLS as required by RFC 3207
            smtp.ehlo()
        else:
            # Direct SSL connection (port 465 typically)
            smtp = smtplib.SMTP_SSL(
                settings.smtp_host, settings.smtp_port, timeout=timeout, context=context
            )
            smtp.ehlo()

        if settings.smtp_username and settings.smtp_password:
            smtp.login(settings.smtp_username, settings.smtp_password)
        return smtp

    def _create_message(
        self,
        to_email: str,
        subject: str,
        html_body: str,
        plain_body: str | None = None,
    ) -> MIMEMultipart:
        """Create email message with proper headers.

        Args:
            to_email: Recipient email address
            subject: Email subject
            html_body: HTML email body
            plain_body: Plain text body (optional)

        Returns:
            Constructed email message
        """
        settings = self.settings
        from_email = settings.smtp_from_email or ""
        msg = MIMEMultipart("alternative")

        msg["Subject"] = subject
        msg["From"] = f"{settings.smtp_from_name} <{from_email}>"
        msg["To"] = to_email

        # Additional headers for better deliverability
        msg["Message-ID"] = make_msgid(domain=from_email.rpartition("@")[2] or None)
        msg["Date"] = formatdate(localtime=True)
        msg["X-Mailer"] = settings.app_name

        if plain_body is None:
            # Generate plain text from HTML (basic strip)
            plain_body = re.sub(r"<[^>]+>", "", html_body)
            plain_body = re.sub(r"\s+", " ", plain_body).strip()
        msg.attach(MIMEText(plain_body, "plain", "utf-8"))
        msg.attach(MIMEText(html_body, "html", "utf-8"))

        return msg

    def _send_email_sync(self, to_email: str, msg: MIMEMultipart) -> None:
        """Synchronous email sending (runs in thread pool)."""
        smtp = None
        try:
            smtp = self._get_smtp_connection()
            smtp.sendmail(self.settings.smtp_from_email, to_email, msg.as_string())
        finally:
            if smtp:
                try:
                    smtp.quit()
                except smtplib.SMTPException:
                    pass

    async def send_email(
        self,
        to_email: str,
        subject: str,
        html_body: str,
        plain_body: str | None = None,
    ) -> None:
        """Send an email via SMTP (non-blocking).

        Uses a thread pool executor to avoid blocking the async event loop.

        Args:
            to_email: Recipient email address
            subject: Email subject
            html_body: HTML email body
            plain_body: Plain text body (optional, auto-generated if not provided)

        Raises:
            EmailDeliveryError: If SMTP is not configured or delivery fails
        """
        if not self.is_configured:
            logger.warning("SMTP not configured, cannot send email")
            raise EmailDeliveryError("SMTP is not configured")

        msg = self._create_message(to_email, subject, html_body, plain_body)

        try:
            loop = asyncio.get_running_loop()
            await asyncio.wait_for(
                loop.run_in_executor(
                    _smtp_executor,
                    partial(self._send_email_sync, to_email, msg),
                ),
                timeout=self.settings.smtp_timeout_seconds,
            )
        except TimeoutError as e:
            logger.error("SMTP send to %s timed out", mask_email(to_email))
            raise EmailDeliveryError("SMTP connection timed out") from e
        except (smtplib.SMTPException, OSError, ValueError) as e:
            # ValueError covers UnicodeEncodeError for non-ASCII addresses
            log_error(logger, f"SMTP error sending email to {mask_email(to_email)}", e)
            raise EmailDeliveryError(type(e).__name__) from e

        logger.info("Email sent successfully to %s", mask_email(to_email))

    def _build_credentials_email(
        self,
        template: str,
        to_email: str,
        user_name: str | None,
        password: str,
    ) -> tuple[str, str, str]:
        """Render a credentials email.

        Returns:
            Tuple of (subject, html_body, plain_body)
        """
        system_name = self.settings.app_name
        texts = {
            key: value.format(system_name=system_name)
            for key, value in EMAIL_TEXTS[template].items()
        }
        login_url = self.settings.login_url

        # Escape user-provided data for HTML to prevent XSS
        name_display = html_escape(user_name or to_email)
        safe_email = html_escape(to_email)
        safe_password = html_escape(password)
        safe_url = html_escape(login_url, quote=True)

        html_body = f"""
        <html>
        <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto;">
            <h2 style="color: #2563eb;">{texts["heading"]}</h2>
            <p>Hello {name_display},</p>
            <p>{texts["intro"]}</p>
            <div style="background-color: #f3f4f6; padding: 16px; border-radius: 8px; margin: 20px 0;">
                <p style="margin: 0;"><strong>Email:</strong> {safe_email}</p>
                <p style="margin: 8px 0 0 0;"><strong>{texts["password_label"]}:</strong></p>
                <p style="font-family: monospace; font-size: 18px; background-color: #fff; padding: 12px; border-radius: 4px; margin: 8px 0;">{safe_password}</p>
            </div>
            <p style="margin-top: 16px;"><a href="{safe_url}" style="display: inline-block; background-color: #2563eb; color: white; padding: 12px 24px; text-decoration: none; border-radius: 6px; font-weight: 500;">Log in here</a></p>
            <p style="color: #dc2626;"><strong>Important:</strong> {texts["warning"]}</p>
            <p>For security reasons, please do not share this email with anyone.</p>
            <hr style="border: none; border-top: 1px solid #e5e7eb; margin: 24px 0;">
            <p style="color: #6b7280; font-size: 12px;">This is an automated message from {system_name}.</p>
        </body>
        </html>
        """
        plain_body = f"""{texts["heading"]}

Hello {user_name or to_email},

{texts["intro"]}

Email: {to_email}
{texts["password_label"]}: {password}

Log in here: {login_url}

IMPORTANT: {texts["warning"]}

For security reasons, please do not share this email with anyone.

---
This is an automated message from {system_name}."""

        return texts["subject"], html_body, plain_body

    async def send_welcome_email(self, to_email: str, user_name: str | None, password: str) -> None:
        """Send a new hire their login email and one-time password.

        Raises:
            EmailDeliveryError: If delivery fails
        """
        subject, html_body, plain_body = self._build_credentials_email(
            "welcome", to_email, user_name, password
        )
        await self.send_email(to_email, subject, html_body, plain_body)

    async def send_credentials_reset_email(
        self, to_email: str, user_name: str | None, password: str
    ) -> None:
        """Send a freshly issued one-time password to an existing account.

        Raises:
            EmailDeliveryError: If delivery fails
        """
        subject, html_body, plain_body = self._build_credentials_email(
            "reset", to_email, user_name, password
        )
        await self.send_email(to_email, subject, html_body, plain_body)
