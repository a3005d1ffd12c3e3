"""Domain data models — pure Python dataclasses."""

import enum
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RoleProfile:
    """A department: the channel it lives in and the instruction it answers with."""

    channel_name: str
    instruction: str


class EventKind(enum.Enum):
    TRIGGER = "trigger"
    DEPARTMENT = "department"
    IGNORED = "ignored"


@dataclass(frozen=True)
class Classification:
    """Result of routing one inbound message."""

    kind: EventKind
    department: Optional[RoleProfile] = None  # set only for DEPARTMENT
