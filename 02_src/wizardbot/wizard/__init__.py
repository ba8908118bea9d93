"""Content-creation wizard."""

from .flags import CreateArgs, build_quick_prompt, parse_create_args, resolve_content_type
from .session import DEFAULT_WIZARD_TIMEOUT, WizardManager, WizardSession
from .steps import CONTENT_SPECS, ContentSpec, ContentType, WizardStep, build_prompt, get_steps

__all__ = [
    "CONTENT_SPECS",
    "ContentSpec",
    "ContentType",
    "WizardStep",
    "build_prompt",
    "get_steps",
    "WizardSession",
    "WizardManager",
    "DEFAULT_WIZARD_TIMEOUT",
    "CreateArgs",
    "parse_create_args",
    "resolve_content_type",
    "build_quick_prompt",
]
