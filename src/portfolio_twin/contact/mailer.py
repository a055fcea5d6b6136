"""Deliver contact form submissions by email.

Each submission is forwarded to the owner's inbox with the visitor's address
as Reply-To. When that succeeds, the visitor gets a short confirmation. SMTP
failures are logged and reported as ``False``; they never raise.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from email.message import EmailMessage

import aiosmtplib

from portfolio_twin.config.loader import resolve_secret
from portfolio_twin.config.schema import ContactConfig, PersonaConfig

logger = logging.getLogger(__name__)


@dataclass
class ContactSubmission:
    """A validated contact form entry."""

    name: str
    email: str
    message: str


class ContactMailer:
    """Sends contact form mail through an SMTP relay."""

    def __init__(self, config: ContactConfig, persona: PersonaConfig):
        """Initialize the mailer.

        Args:
            config: SMTP connection and credentials
            persona: Owner details used in the confirmation mail
        """
        self.config = config
        self.persona = persona

    @property
    def sender(self) -> str | None:
        return resolve_secret(self.config.username, self.config.username_env)

    @property
    def receiver(self) -> str | None:
        return resolve_secret(self.config.receiver, self.config.receiver_env)

    @property
    def is_configured(self) -> bool:
        password = resolve_secret(self.config.password, self.config.password_env)
        return bool(self.sender and password and self.receiver)

    def build_forward_message(self, submission: ContactSubmission) -> EmailMessage:
        """Mail to the owner carrying the visitor's message."""
        msg = EmailMessage()
        msg["Subject"] = f"Portfolio Contact: Message from {submission.name}"
        _set_address(msg, "From", self.sender)
        _set_address(msg, "To", self.receiver)
        msg["Reply-To"] = submission.email
        msg.set_content(
            f"New contact form submission\n\n"
            f"From: {submission.name}\n"
            f"Email: {submission.email}\n\n"
            f"{submission.message}\n"
        )
        body = html.escape(submission.message).replace("\n", "<br>")
        msg.add_alternative(
            f"<h3>New Contact Form Submission</h3>"
            f"<p><strong>From:</strong> {html.escape(submission.name)}</p>"
            f"<p><strong>Email:</strong> {html.escape(submission.email)}</p>"
            f"<p><strong>Message:</strong></p><div>{body}</div>"
            f"<hr><p><small>Sent via {html.escape(self.persona.name)}'s portfolio contact form"
            f"</small></p>",
            subtype="html",
        )
        return msg

    def build_auto_reply(self, submission: ContactSubmission) -> EmailMessage:
        """Confirmation mail to the visitor."""
        owner = self.persona.name
        links = {
            label: self.persona.contact[key]
            for label, key in (("LinkedIn", "linkedin"), ("GitHub", "github"))
            if self.persona.contact.get(key)
        }

        msg = EmailMessage()
        msg["Subject"] = f"Thank you for contacting {owner}"
        _set_address(msg, "From", self.sender)
        msg["To"] = submission.email
        text_links = "".join(f"- {label}: {url}\n" for label, url in links.items())
        msg.set_content(
            f"Hi {submission.name},\n\n"
            f"Thank you for your message through my portfolio website. I've received your "
            f"inquiry and will get back to you as soon as possible.\n\n"
            f"{text_links}\n"
            f"Best regards,\n{owner}\n{self.persona.title}\n"
        )
        html_links = "".join(
            f'<li><a href="{html.escape(_as_url(url))}">{label}</a></li>'
            for label, url in links.items()
        )
        msg.add_alternative(
            f"<h3>Thank you for reaching out!</h3>"
            f"<p>Hi {html.escape(submission.name)},</p>"
            f"<p>Thank you for your message through my portfolio website. I've received your "
            f"inquiry and will get back to you as soon as possible.</p>"
            f"<ul>{html_links}</ul>"
            f"<p>Best regards,<br>{html.escape(owner)}<br>{html.escape(self.persona.title)}</p>",
            subtype="html",
        )
        return msg

    async def forward(self, submission: ContactSubmission) -> bool:
        """Send the submission to the owner. Returns True when the relay accepted it."""
        return await self._send(self.build_forward_message(submission), "forward")

    async def send_auto_reply(self, submission: ContactSubmission) -> bool:
        """Send the visitor a confirmation. Returns True when the relay accepted it."""
        if not self.config.auto_reply:
            return False
        return await self._send(self.build_auto_reply(submission), "auto-reply")

    async def _send(self, msg: EmailMessage, purpose: str) -> bool:
        if not self.is_configured:
            logger.warning(
                "Contact %s skipped: set %s, %s and %s",
                purpose,
                self.config.username_env,
                self.config.password_env,
                self.config.receiver_env,
            )
            return False

        try:
            await aiosmtplib.send(
                msg,
                hostname=self.config.smtp_host,
                port=self.config.smtp_port,
                username=self.sender,
                password=resolve_secret(self.config.password, self.config.password_env),
                start_tls=self.config.start_tls,
                timeout=self.config.timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error("Contact %s failed: %s", purpose, e)
            return False

        logger.info("Contact %s sent to %s", purpose, msg["To"])
        return True


def _set_address(msg: EmailMessage, header: str, address: str | None) -> None:
    if address:
        msg[header] = address


def _as_url(value: str) -> str:
    return value if value.startswith(("http://", "https://")) else f"https://{value}"
