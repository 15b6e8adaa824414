"""
Channel catalogue.

Each publishing destination may carry a character limit. A strict limit is
enforced by the platform itself (the post is rejected), a soft one is a
house-style recommendation.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChannelSpec:
    id: str
    name: str
    char_limit: int | None = None
    strict_limit: bool = False
    description: str = ""


CHANNELS: tuple[ChannelSpec, ...] = (
    ChannelSpec("x_post", "X post (Tweet)", 280, True, "280 character limit"),
    ChannelSpec("bluesky_post", "Bluesky post", 300, True, "300 character limit"),
    ChannelSpec("linkedin_post", "LinkedIn post", 3000, False, "3,000 character limit"),
    ChannelSpec("instagram_caption", "Instagram caption", 2200, False, "2,200 character limit"),
    ChannelSpec("threads_post", "Threads post", 500, True, "500 character limit"),
    ChannelSpec("sms", "SMS", 160, True, "160 characters (single segment)"),
    ChannelSpec("push_notification", "Push notification", 120, False, "Title 30, body 90 characters"),
    ChannelSpec("email_subject", "Email subject line", 60, False, "45-60 characters recommended"),
    ChannelSpec("hero_headline", "Hero headline", 70, False, "40-70 characters"),
    ChannelSpec("cta_button", "CTA button label", 18, False, "12-18 characters"),
    ChannelSpec("error_message", "Error message", 120, False, "60-120 characters"),
    ChannelSpec("print_ad_half", "Print ad (half page)", None, False, "80-180 words"),
    ChannelSpec("web_banner", "Web banner", 120, False, "Headline 25-40, subcopy 40-80 characters"),
    ChannelSpec("press_release", "Press release", None, False, "400-700 words recommended"),
    ChannelSpec("website", "Website", None, False, "General website content"),
    ChannelSpec("ui", "Product UI", None, False, "User interface copy"),
    ChannelSpec("support", "Support", None, False, "Support documentation"),
    ChannelSpec("marketing", "Marketing", None, False, "Marketing content"),
)

_CHANNELS_BY_ID = {channel.id: channel for channel in CHANNELS}


def get_channel(channel_id: str | None) -> ChannelSpec | None:
    if not channel_id:
        return None
    return _CHANNELS_BY_ID.get(channel_id)


def all_channels() -> tuple[ChannelSpec, ...]:
    return CHANNELS


def default_char_limit(channel_id: str | None = None) -> int | None:
    channel = get_channel(channel_id)
    return channel.char_limit if channel else None


def is_strict_limit(channel_id: str | None = None) -> bool:
    channel = get_channel(channel_id)
    return channel.strict_limit if channel else False
