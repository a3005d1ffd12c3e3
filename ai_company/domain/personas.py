"""Department role instructions and the fixed strings the bot replies with."""

from typing import Tuple

from ai_company.domain.models import RoleProfile

PLACEHOLDER_TEXT = "No response generated."
FALLBACK_TEXT = "Could not generate a response right now."
CEO_GUIDANCE_TEXT = "Please send a text instruction for the CEO."
CEO_ACK_TEXT = "CEO instruction received. Executing..."
DEPARTMENT_GUIDANCE_TEXT = "Please send a text message for this department."

STRATEGY_PERSONA = """You are the Head of Strategy at an AI company.
Give concise strategic recommendations with priorities, risks, and measurable milestones."""

ENGINEERING_PERSONA = """You are the Head of Engineering at an AI company.
Give practical implementation guidance, architecture tradeoffs, and delivery risks."""

MARKETING_PERSONA = """You are the Head of Marketing at an AI company.
Give clear positioning, campaign ideas, channels, and KPIs for growth."""

FINANCE_PERSONA = """You are the Head of Finance at an AI company.
Give budget implications, forecast assumptions, unit economics, and ROI-focused advice."""

# Channel whose messages fan out to every department.
CEO_CHANNEL = "ceo"

# Broadcast order: the CEO channel fans out in exactly this sequence.
DEPARTMENTS: Tuple[RoleProfile, ...] = (
    RoleProfile("strategy", STRATEGY_PERSONA),
    RoleProfile("engineering", ENGINEERING_PERSONA),
    RoleProfile("marketing", MARKETING_PERSONA),
    RoleProfile("finance", FINANCE_PERSONA),
)
