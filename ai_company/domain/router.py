"""Pure classification of inbound messages."""

from typing import Iterable

from ai_company.domain.models import Classification, EventKind, RoleProfile
from ai_company.ports.inbound import IncomingMessage

IGNORED = Classification(EventKind.IGNORED)
TRIGGER = Classification(EventKind.TRIGGER)


def classify(
    msg: IncomingMessage,
    trigger_channel: str,
    departments: Iterable[RoleProfile],
) -> Classification:
    """Decide how a message is handled. No side effects."""
    if msg.is_bot or msg.guild_id is None:
        return IGNORED

    if msg.channel_name == trigger_channel:
        return TRIGGER

    for profile in departments:
        if profile.channel_name == msg.channel_name:
            return Classification(EventKind.DEPARTMENT, department=profile)
    return IGNORED
