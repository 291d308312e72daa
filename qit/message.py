"""Commit types and commit message formatting."""

from enum import Enum

from .config import Settings


class CommitType(str, Enum):
    CHORE = "chore"
    FEATURE = "feature"
    REFACTOR = "refactor"
    FIX = "fix"
    TEST = "test"
    STYLE = "style"
    DOC = "doc"
    DEPS = "deps"
    DEPLOY = "deploy"
    WIP = "wip"

    @property
    def emoji(self):
        return COMMIT_EMOJIS[self]


# Emojis inspired by https://gitmoji.dev/
COMMIT_EMOJIS = {
    CommitType.CHORE: "🚧",
    CommitType.FEATURE: "✨",
    CommitType.REFACTOR: "♻️",
    CommitType.FIX: "🐛",
    CommitType.TEST: "✅",
    CommitType.STYLE: "🎨",
    CommitType.DOC: "📝",
    CommitType.DEPS: "📦",
    CommitType.DEPLOY: "🚀",
    CommitType.WIP: "⏳",
}

COMMIT_TYPE_NAMES = [t.value for t in CommitType]


def format_commit_message(commit_type, message, area=None, settings=None):
    """
    Build a single-line commit message: ``[<emoji> ]<type>[(<area>)]: <message>``.

    ``commit_type`` may be a CommitType or its string value; any other value raises
    ValueError. The emoji is left out when ``settings.disable_emojis`` is set.
    """
    ctype = CommitType(commit_type)
    settings = settings or Settings()

    if not isinstance(message, str) or not message.strip():
        raise ValueError("Commit message is required")

    subject = ctype.value
    if area is not None:
        subject = f"{subject}({area})"
    formatted = f"{subject}: {message}"
    if not settings.disable_emojis:
        formatted = f"{ctype.emoji} {formatted}"
    return formatted.strip()


def format_emoji_table():
    """Render the type/emoji table shown in ``qit commit --help``."""
    width = max(len(name) for name in COMMIT_TYPE_NAMES)
    return "\n".join(f"{t.value:>{width}} {t.emoji}" for t in CommitType)
