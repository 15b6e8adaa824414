"""
Channel constraint checks.

Lengths are counted in Python characters (code points).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from brandvoice.channels.config import get_channel

ELLIPSIS = "..."

CheckStatus = Literal["ok", "warning", "invalid"]


def validate_length(text: str, max_length: int | None = None) -> bool:
    """True when there is no limit or text fits within it."""
    if max_length is None:
        return True
    return len(text) <= max_length


def trim_to_fit(text: str, max_length: int) -> str:
    """
    Shorten text to exactly max_length characters, ending in "...".

    Text that already fits is returned unchanged. Limits shorter than the
    ellipsis keep no text at all and return the ellipsis cut to the limit.

    Raises:
        ValueError: If max_length is negative
    """
    if max_length < 0:
        raise ValueError(f"max_length must be >= 0, got {max_length}")

    if len(text) <= max_length:
        return text

    if max_length < len(ELLIPSIS):
        return ELLIPSIS[:max_length]

    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


@dataclass(frozen=True)
class ChannelCheckResult:
    """
    Outcome of checking copy against a channel.

    status is "ok" when the copy fits (or there is no limit), "invalid" when
    it overflows a strict limit, and "warning" when it overflows a soft one.
    trimmed is only set when the copy overflows.
    """

    channel_id: str | None
    max_length: int | None
    length: int
    strict: bool
    status: CheckStatus
    trimmed: str | None = None

    @property
    def within_limit(self) -> bool:
        return self.status == "ok"


def check_channel_copy(
    text: str,
    channel_id: str | None = None,
    max_length: int | None = None,
) -> ChannelCheckResult:
    """
    Check copy against a channel's limit.

    An explicit max_length overrides the channel's own limit. Unknown or
    missing channels have no limit and are never strict.
    """
    channel = get_channel(channel_id)
    limit = max_length if max_length is not None else (channel.char_limit if channel else None)
    strict = channel.strict_limit if channel else False

    if validate_length(text, limit):
        return ChannelCheckResult(
            channel_id=channel_id,
            max_length=limit,
            length=len(text),
            strict=strict,
            status="ok",
        )

    return ChannelCheckResult(
        channel_id=channel_id,
        max_length=limit,
        length=len(text),
        strict=strict,
        status="invalid" if strict else "warning",
        trimmed=trim_to_fit(text, limit),
    )
