"""Bot configuration loaded from the environment."""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

DEFAULT_BASE_URL = "https://api.minimax.chat/v1"
DEFAULT_MODEL = "abab5.5-chat"
DEFAULT_COMPLETION_TIMEOUT = 60.0
DEFAULT_POLL_TIMEOUT = 30.0
DEFAULT_RATE_LIMIT = 1.0
DEFAULT_WIZARD_TIMEOUT = 600.0
DEFAULT_MAX_MESSAGE_LENGTH = 4096

_DURATION_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(ms|s|m|h)?\s*$")
_UNIT_SECONDS = {"ms": 0.001, "s": 1.0, "m": 60.0, "h": 3600.0}


def parse_duration(value: str) -> float | None:
    """Parse ``500ms``, ``30s``, ``10m``, ``1h`` or bare seconds into seconds."""
    match = _DURATION_RE.match(value or "")
    if not match:
        return None
    number, unit = match.groups()
    return float(number) * _UNIT_SECONDS[unit or "s"]


def parse_int_list(value: str) -> list[int]:
    """Parse a comma-separated list of integers, skipping invalid entries."""
    result = []
    for part in (value or "").split(","):
        part = part.strip()
        if not part:
            continue
        try:
            result.append(int(part))
        except ValueError:
            continue
    return result


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1")


@dataclass
class BotConfig:
    """All settings for the bot process."""

    telegram_bot_token: str = ""

    minimax_api_key: str = ""
    minimax_base_url: str = DEFAULT_BASE_URL
    minimax_model: str = DEFAULT_MODEL
    minimax_timeout: float = DEFAULT_COMPLETION_TIMEOUT

    bot_name: str = ""
    admin_user_ids: list[int] = field(default_factory=list)
    allowed_users: list[int] = field(default_factory=list)
    enable_group_chat: bool = False

    poll_timeout: float = DEFAULT_POLL_TIMEOUT
    rate_limit: float = DEFAULT_RATE_LIMIT
    wizard_timeout: float = DEFAULT_WIZARD_TIMEOUT
    max_message_length: int = DEFAULT_MAX_MESSAGE_LENGTH
    system_prompt: str = ""

    enable_inline_mode: bool = False

    webhook_url: str = ""
    webhook_secret: str = ""

    api_host: str = "localhost"
    api_port: int = 8000
    log_level: str = "INFO"
    log_file: str = str(DEFAULT_LOG_PATH)

    @property
    def webhook_mode(self) -> bool:
        return bool(self.webhook_url)

    def validate(self) -> None:
        """Raise ConfigError on missing required values; reset bad timeouts."""
        if not self.telegram_bot_token:
            raise ConfigError("telegram bot token is required")
        if not self.minimax_api_key:
            raise ConfigError("minimax api key is required")
        if not self.minimax_base_url:
            raise ConfigError("minimax base url is required")
        if self.webhook_url and not self.webhook_url.startswith("https://"):
            raise ConfigError("webhook url must use https")

        if self.poll_timeout <= 0:
            self.poll_timeout = DEFAULT_POLL_TIMEOUT
        if self.minimax_timeout <= 0:
            self.minimax_timeout = DEFAULT_COMPLETION_TIMEOUT
        if self.rate_limit <= 0:
            self.rate_limit = DEFAULT_RATE_LIMIT
        if self.wizard_timeout <= 0:
            self.wizard_timeout = DEFAULT_WIZARD_TIMEOUT
        if self.max_message_length <= 3:
            self.max_message_length = DEFAULT_MAX_MESSAGE_LENGTH

    @classmethod
    def from_env(cls) -> "BotConfig":
        """Build a config from environment variables on top of the defaults."""
        cfg = cls()
        env = os.environ

        cfg.telegram_bot_token = env.get("TELEGRAM_BOT_TOKEN", "").strip()
        cfg.minimax_api_key = env.get("MINIMAX_API_KEY", "").strip()
        if env.get("MINIMAX_BASE_URL"):
            cfg.minimax_base_url = env["MINIMAX_BASE_URL"].strip().rstrip("/")
        if env.get("MINIMAX_MODEL"):
            cfg.minimax_model = env["MINIMAX_MODEL"].strip()

        cfg.bot_name = env.get("BOT_NAME", "")
        cfg.admin_user_ids = parse_int_list(env.get("ADMIN_USER_IDS", ""))
        cfg.allowed_users = parse_int_list(env.get("ALLOWED_USERS", ""))

        if env.get("ENABLE_GROUP_CHAT"):
            cfg.enable_group_chat = _parse_bool(env["ENABLE_GROUP_CHAT"])
        if env.get("ENABLE_INLINE_MODE"):
            cfg.enable_inline_mode = _parse_bool(env["ENABLE_INLINE_MODE"])

        durations = {
            "MINIMAX_TIMEOUT": "minimax_timeout",
            "POLL_TIMEOUT": "poll_timeout",
            "RATE_LIMIT": "rate_limit",
            "WIZARD_TIMEOUT": "wizard_timeout",
        }
        for var, attr in durations.items():
            parsed = parse_duration(env.get(var, ""))
            if parsed is not None:
                setattr(cfg, attr, parsed)

        if env.get("MAX_MESSAGE_LENGTH", "").isdigit():
            cfg.max_message_length = int(env["MAX_MESSAGE_LENGTH"])

        cfg.system_prompt = env.get("SYSTEM_PROMPT", "")
        cfg.webhook_url = env.get("WEBHOOK_URL", "").strip()
        cfg.webhook_secret = env.get("WEBHOOK_SECRET", "").strip()

        cfg.api_host = env.get("API_HOST", cfg.api_host)
        if env.get("API_PORT", "").isdigit():
            cfg.api_port = int(env["API_PORT"])
        cfg.log_level = env.get("LOG_LEVEL", cfg.log_level)
        cfg.log_file = env.get("LOG_FILE", cfg.log_file)

        return cfg
