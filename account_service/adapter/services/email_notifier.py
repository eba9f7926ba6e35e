from typing import Optional

from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from fastapi_mail.errors import ConnectionErrors
from pydantic import ValidationError

from account_service.app.services.notifier import INotifier, NotificationError


class EmailNotifier(INotifier):
    """
    SMTP notifier backed by fastapi-mail.

    The connection settings come from ApplicationConfig (MAIL_* keys). The
    FastMail client is built on first send so that a service without mail
    credentials still starts; the failure surfaces as NotificationError.
    """

    def __init__(self, config):
        self.config = config
        self._mailer: Optional[FastMail] = None

    @property
    def mailer(self) -> FastMail:
        if self._mailer is None:
            self._mailer = FastMail(
                ConnectionConfig(
                    MAIL_USERNAME=self.config.MAIL_USERNAME,
                    MAIL_PASSWORD=self.config.MAIL_PASSWORD,
                    MAIL_FROM=self.config.MAIL_FROM,
                    MAIL_FROM_NAME=self.config.MAIL_FROM_NAME,
                    MAIL_PORT=self.config.MAIL_PORT,
                    MAIL_SERVER=self.config.MAIL_SERVER,
                    MAIL_STARTTLS=self.config.MAIL_STARTTLS,
                    MAIL_SSL_TLS=self.config.MAIL_SSL_TLS,
                    USE_CREDENTIALS=bool(self.config.MAIL_USERNAME),
                    SUPPRESS_SEND=int(self.config.MAIL_SUPPRESS_SEND),
                )
            )
        return self._mailer

    async def send(self, to_address: str, subject: str, html_body: str) -> None:
        try:
            message = MessageSchema(
                subject=subject,
                recipients=[to_address],
                body=html_body,
                subtype=MessageType.html,
            )
            await self.mailer.send_message(message)
        except (ConnectionErrors, ValidationError) as exc:
            raise NotificationError(str(exc)) from exc
