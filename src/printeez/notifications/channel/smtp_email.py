"""SMTP email adapter: delivers through an authenticated STARTTLS server."""

import smtplib
from email.message import EmailMessage
from email.utils import make_msgid

import structlog

from printeez.notifications.channel.email_port import Delivery, EmailPort

logger = structlog.get_logger(__name__)


class SmtpEmailAdapter(EmailPort):
    def __init__(self, host: str, port: int, username: str | None, password: str | None, sender: str, timeout=10):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender
        self.timeout = timeout

    def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> Delivery:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = make_msgid(domain="printeez.com")
        message.set_content(body)
        if html_body:
            message.add_alternative(html_body, subtype="html")

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                smtp.starttls()
                if self.username and self.password:
                    smtp.login(self.username, self.password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.warning("smtp_send_failed", to=to, host=self.host, error=str(exc))
            return self.failed(str(exc))

        return self.sent(message["Message-ID"])
