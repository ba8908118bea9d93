"""Error taxonomy shared by all components."""


class BotError(Exception):
    """Base class for all wizardbot errors."""


class ConfigError(BotError):
    """Invalid or missing configuration. Fatal at startup."""


class ValidationError(BotError):
    """Bad user input or request shape, answered locally with a corrective reply."""


class TransportError(BotError):
    """Network or encoding failure talking to an upstream service."""


class RequestError(TransportError):
    """Transport failure raised by the completion gateway."""


class PollingError(BotError):
    """Long polling started twice or stopped while not running."""


class RemoteAPIError(BotError):
    """Upstream service answered with a structured failure."""

    def __init__(
        self,
        code: str | int,
        description: str,
        status_code: int | None = None,
        error_type: str = "",
    ):
        self.code = code
        self.description = description
        self.status_code = status_code
        self.error_type = error_type
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"API error {self.code} (HTTP {self.status_code}): {self.description}"
        return f"API error {self.code}: {self.description}"


class TelegramAPIError(RemoteAPIError):
    """Telegram Bot API returned ``ok=false``."""

    def __init__(self, code: int, description: str, retry_after: int | None = None):
        self.retry_after = retry_after
        super().__init__(code=code, description=description)

    def __str__(self) -> str:
        return f"telegram API error {self.code}: {self.description}"
