"""Split long generated replies into Discord-sized messages."""

from typing import List, Optional

from ai_company.domain.personas import PLACEHOLDER_TEXT

DISCORD_MAX_LENGTH = 2000


def split_message(text: Optional[str], max_length: int = DISCORD_MAX_LENGTH) -> List[str]:
    """Split text into chunks of at most ``max_length`` characters.

    Cuts at the last newline inside the window, else the last space, else
    hard at ``max_length``. Chunks are stripped; the text following a cut
    loses its leading whitespace, and a slice that is only whitespace is
    dropped rather than sent. Never returns an empty list.
    """
    source = "" if text is None else str(text)
    if not source:
        return [PLACEHOLDER_TEXT]
    if len(source) <= max_length:
        return [source]

    chunks: List[str] = []
    remaining = source

    while len(remaining) > max_length:
        # The window includes index max_length itself: a break there still
        # leaves a max_length chunk in front of it.
        cut = remaining.rfind("\n", 0, max_length + 1)
        if cut <= 0:
            cut = remaining.rfind(" ", 0, max_length + 1)
        if cut <= 0:
            cut = max_length

        chunk = remaining[:cut].strip()
        if chunk:
            chunks.append(chunk)
        remaining = remaining[cut:].lstrip()

    if remaining:
        chunks.append(remaining)
    # Whitespace-only input: fall back to the untrimmed hard cut.
    return chunks or [source[:max_length]]
