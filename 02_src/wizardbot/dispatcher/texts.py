"""Fixed user-facing replies."""

from ..wizard import CONTENT_SPECS

WIZARD_CANCEL_HINT = "(Type /cancel to cancel the wizard)"

RATE_LIMITED = "Please wait a moment before sending another message."
STILL_PROCESSING = "I'm still processing your previous message. Please wait."
THINKING = "🤔 Thinking..."
NOT_AUTHORIZED = "Sorry, you are not authorized to use this bot."
CONVERSATION_CLEARED = "🗑️ Conversation history cleared!"
WIZARD_CANCELLED = "Wizard cancelled. Your session has been reset."
GENERATING_FROM_ANSWERS = "Generating content based on your answers..."
GENERATING = "Generating content..."


def welcome_text(bot_name: str) -> str:
    return (
        f"Welcome to {bot_name}!\n\n"
        "I'm an AI assistant powered by Minimax. You can talk to me by sending messages.\n\n"
        "Available commands:\n"
        "/start - Show this welcome message\n"
        "/clear - Clear conversation history\n"
        "/help - Show help information\n"
        "/status - Show bot status\n"
        "/create - Content creation wizard"
    )


HELP_TEXT = (
    "Help\n\n"
    "You can communicate with me by sending messages. I'll respond using Minimax AI.\n\n"
    "Commands:\n"
    "/start - Start the bot\n"
    "/clear - Clear conversation history\n"
    "/help - Show this help message\n"
    "/status - Show bot status\n"
    "/create - Content creation wizard\n"
    "/cancel - Cancel active wizard\n\n"
    "Tips:\n"
    "- Be specific in your questions\n"
    "- Provide context when needed\n"
    "- Use follow-up questions for more details"
)


def content_type_list() -> str:
    return "\n".join(
        f"- {content_type.value} - {spec.description}"
        for content_type, spec in CONTENT_SPECS.items()
    )


def create_usage_text() -> str:
    return (
        "Content Creation Wizard\n\n"
        "Use /create to start an interactive wizard for creating content.\n\n"
        "Usage:\n/create <type> [flags]\n\n"
        f"Content Types:\n{content_type_list()}\n\n"
        "Flags:\n"
        "-t <text>  - Quick prompt (bypasses wizard)\n"
        "-m <text>  - Message/instructions\n"
        "-s <style> - Writing style\n\n"
        "Examples:\n"
        "/create marketing\n"
        "/create email -t newsletter signup\n"
        "/create poem -t autumn leaves -s haiku"
    )


def unknown_content_type_text(name: str) -> str:
    return f"Unknown content type: {name}\n\nAvailable types:\n{content_type_list()}"
