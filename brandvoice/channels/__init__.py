"""
Publishing channels and their copy length constraints.
"""

from brandvoice.channels.config import (
    CHANNELS,
    ChannelSpec,
    all_channels,
    default_char_limit,
    get_channel,
    is_strict_limit,
)
from brandvoice.channels.constraints import (
    ELLIPSIS,
    check_channel_copy,
    trim_to_fit,
    validate_length,
)

__all__ = [
    "CHANNELS",
    "ChannelSpec",
    "ELLIPSIS",
    "all_channels",
    "check_channel_copy",
    "default_char_limit",
    "get_channel",
    "is_strict_limit",
    "trim_to_fit",
    "validate_length",
]
