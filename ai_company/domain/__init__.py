"""Domain layer — pure Python, no framework dependencies."""

from ai_company.domain.models import Classification, EventKind, RoleProfile
from ai_company.domain.chunker import DISCORD_MAX_LENGTH, split_message
from ai_company.domain.relay import reply_all, send_all
from ai_company.domain.router import classify
from ai_company.domain.company import CompanyBrain, resolve_channel
from ai_company.domain.personas import CEO_CHANNEL, DEPARTMENTS, FALLBACK_TEXT, PLACEHOLDER_TEXT

__all__ = [
    "Classification",
    "EventKind",
    "RoleProfile",
    "DISCORD_MAX_LENGTH",
    "split_message",
    "reply_all",
    "send_all",
    "classify",
    "CompanyBrain",
    "resolve_channel",
    "CEO_CHANNEL",
    "DEPARTMENTS",
    "FALLBACK_TEXT",
    "PLACEHOLDER_TEXT",
]
