"""Question steps and prompt templates for each content type."""

from dataclasses import dataclass
from enum import Enum


class ContentType(str, Enum):
    """Kinds of content the creation wizard can produce."""

    MARKETING = "marketing"
    EMAIL = "email"
    REPORT = "report"
    SCRIPT = "script"
    WHITEPAPER = "whitepaper"
    STORY = "story"
    POEM = "poem"

    @classmethod
    def parse(cls, value: str) -> "ContentType | None":
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class WizardStep:
    """One question of a wizard.

    ``label`` and ``suffix`` render the answer into the final prompt as
    ``"{label}: {answer}{suffix}"``.
    """

    key: str
    question: str
    label: str
    suffix: str = ""


@dataclass(frozen=True)
class ContentSpec:
    """Static definition of a content type: its questions and prompt prose."""

    description: str
    heading: str
    closing: str
    steps: tuple[WizardStep, ...]

    def render(self, answers: dict[str, str]) -> str:
        lines = [
            f"{step.label}: {answers.get(step.key, '')}{step.suffix}" for step in self.steps
        ]
        return f"{self.heading}\n\n" + "\n".join(lines) + f"\n\n{self.closing}"


CONTENT_SPECS: dict[ContentType, ContentSpec] = {
    ContentType.MARKETING: ContentSpec(
        description="Marketing copy",
        heading="Create marketing copy with the following details:",
        closing="Please create compelling marketing copy that incorporates all these elements.",
        steps=(
            WizardStep("website_name", "What is the name of your website or business?", "Website/Business"),
            WizardStep("website_url", "What is the URL of your website?", "URL"),
            WizardStep(
                "target_audience",
                "Who is your target audience? (e.g., small business owners, tech enthusiasts)",
                "Target Audience",
            ),
            WizardStep(
                "key_benefits",
                "What are the key benefits or features of your product/service?",
                "Key Benefits",
            ),
            WizardStep(
                "tone",
                "What tone would you like? (e.g., professional, friendly, urgent, humorous)",
                "Tone",
            ),
            WizardStep("length", "What length would you like? (short/medium/long)", "Length"),
            WizardStep(
                "topic",
                "What specific topic or angle should the marketing copy focus on?",
                "Topic/Angle",
            ),
            WizardStep(
                "cta",
                "What call-to-action should be included? (e.g., Sign up now, Learn more, Contact us)",
                "Call-to-Action",
            ),
        ),
    ),
    ContentType.EMAIL: ContentSpec(
        description="Email content",
        heading="Write an email with the following details:",
        closing="Please create a complete email incorporating all these elements.",
        steps=(
            WizardStep("subject", "What is the subject line of the email?", "Subject"),
            WizardStep(
                "recipient",
                "Who is the recipient? (e.g., potential customers, existing clients)",
                "Recipient",
            ),
            WizardStep(
                "purpose",
                "What is the purpose of this email? (e.g., newsletter, promotion, announcement)",
                "Purpose",
            ),
            WizardStep("tone", "What tone would you like? (e.g., formal, casual, friendly)", "Tone"),
            WizardStep(
                "key_message",
                "What is the key message or offer you want to convey?",
                "Key Message",
            ),
            WizardStep(
                "cta",
                "What action should the recipient take? (e.g., Click here, Reply, Visit)",
                "Call-to-Action",
            ),
        ),
    ),
    ContentType.REPORT: ContentSpec(
        description="Business report",
        heading="Create a report with the following details:",
        closing="Please create a comprehensive report incorporating all these elements.",
        steps=(
            WizardStep("title", "What is the title of the report?", "Title"),
            WizardStep("audience", "Who is the target audience for this report?", "Target Audience"),
            WizardStep("topic", "What is the main topic or subject of the report?", "Topic"),
            WizardStep(
                "scope",
                "What is the scope of the report? (e.g., industry analysis, market research)",
                "Scope",
            ),
            WizardStep("key_points", "What are the key points or findings to include?", "Key Points"),
            WizardStep("length", "What length would you like? (brief/medium/comprehensive)", "Length"),
            WizardStep(
                "format",
                "What format would you prefer? (e.g., executive summary, detailed analysis)",
                "Format",
            ),
        ),
    ),
    ContentType.SCRIPT: ContentSpec(
        description="Video/podcast script",
        heading="Write a script with the following details:",
        closing="Please create a complete script incorporating all these elements.",
        steps=(
            WizardStep("type", "What type of script? (e.g., video, podcast, advertisement)", "Type"),
            WizardStep("topic", "What is the main topic or subject?", "Topic"),
            WizardStep(
                "duration",
                "What is the desired duration? (e.g., 30 seconds, 5 minutes)",
                "Duration",
            ),
            WizardStep("audience", "Who is the target audience?", "Target Audience"),
            WizardStep(
                "tone",
                "What tone would you like? (e.g., serious, humorous, inspirational)",
                "Tone",
            ),
            WizardStep("key_message", "What is the key message to convey?", "Key Message"),
            WizardStep("cta", "What call-to-action should be included?", "Call-to-Action"),
        ),
    ),
    ContentType.WHITEPAPER: ContentSpec(
        description="Whitepaper",
        heading="Create a whitepaper with the following details:",
        closing="Please create a comprehensive whitepaper incorporating all these elements.",
        steps=(
            WizardStep("title", "What is the title of the whitepaper?", "Title"),
            WizardStep("topic", "What is the main topic or research question?", "Topic"),
            WizardStep("audience", "Who is the target audience?", "Target Audience"),
            WizardStep("problem", "What problem or challenge does it address?", "Problem/Challenge"),
            WizardStep("solution", "What is the proposed solution or findings?", "Solution/Findings"),
            WizardStep("length", "What length would you like? (short/medium/long)", "Length"),
            WizardStep(
                "tone",
                "What tone would you like? (e.g., academic, professional, accessible)",
                "Tone",
            ),
        ),
    ),
    ContentType.STORY: ContentSpec(
        description="Creative story",
        heading="Write a story with the following details:",
        closing="Please create an engaging story incorporating all these elements.",
        steps=(
            WizardStep(
                "genre",
                "What genre? (e.g., sci-fi, fantasy, romance, mystery, literary)",
                "Genre",
            ),
            WizardStep("premise", "What is the premise or plot idea?", "Premise"),
            WizardStep("characters", "Describe the main characters (optional):", "Characters"),
            WizardStep(
                "setting",
                "What is the setting? (e.g., modern city, medieval kingdom, space station)",
                "Setting",
            ),
            WizardStep(
                "tone",
                "What tone? (e.g., dark, uplifting, suspenseful, humorous)",
                "Tone",
            ),
            WizardStep("length", "What length? (short story/novella/novel excerpt)", "Length"),
        ),
    ),
    ContentType.POEM: ContentSpec(
        description="Poem",
        heading="Write a poem with the following details:",
        closing="Please create a poem incorporating all these elements.",
        steps=(
            WizardStep(
                "style",
                "What style of poem? (e.g., haiku, sonnet, free verse, limerick, ballad)",
                "Style",
            ),
            WizardStep("topic", "What is the topic or theme?", "Topic"),
            WizardStep(
                "mood",
                "What mood? (e.g., melancholy, joyful, reflective, romantic)",
                "Mood",
            ),
            WizardStep("length", "How many lines? (e.g., 4, 8, 16, 32)", "Length", suffix=" lines"),
            WizardStep(
                "structure",
                "Any specific structure or rhyming scheme? (optional)",
                "Structure",
            ),
        ),
    ),
}


def get_steps(content_type: ContentType | str) -> tuple[WizardStep, ...]:
    """Ordered steps for a content type; empty for an unknown type."""
    spec = CONTENT_SPECS.get(content_type)  # type: ignore[call-overload]
    if spec is None:
        return ()
    return spec.steps


def build_prompt(content_type: ContentType | str, answers: dict[str, str]) -> str:
    """Render collected answers into the content type's instruction template."""
    spec = CONTENT_SPECS.get(content_type)  # type: ignore[call-overload]
    if spec is None:
        return ""
    return spec.render(answers)
