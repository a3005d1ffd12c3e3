"""Channel relay — post a long text as ordered chunks."""

from ai_company.domain.chunker import DISCORD_MAX_LENGTH, split_message
from ai_company.domain.errors import RelaySendError
from ai_company.ports.outbound import MessageHandlePort, TextChannelPort


async def send_all(channel: TextChannelPort, text: str, max_length: int = DISCORD_MAX_LENGTH) -> int:
    """Post every chunk of ``text`` to ``channel`` in order. Returns the chunk count."""
    chunks = split_message(text, max_length)
    for chunk in chunks:
        try:
            await channel.send(chunk)
        except Exception as e:
            raise RelaySendError(f"send to #{channel.name} failed: {e}") from e
    return len(chunks)


async def reply_all(handle: MessageHandlePort, text: str, max_length: int = DISCORD_MAX_LENGTH) -> int:
    """Reply with the first chunk, then post the rest as plain channel messages.

    Only the first chunk is a reply so the reply chain stays one level deep.
    """
    chunks = split_message(text, max_length)
    try:
        await handle.reply(chunks[0])
        for chunk in chunks[1:]:
            await handle.send(chunk)
    except Exception as e:
        raise RelaySendError(f"reply failed: {e}") from e
    return len(chunks)
