# storefront/rendering/embeds.py
import re
from typing import Optional
from urllib.parse import quote

YOUTUBE_PATTERN = re.compile(r"(?:youtube\.com/(?:watch\?v=|embed/)|youtu\.be/)([a-zA-Z0-9_-]{11})")
VIMEO_PATTERN = re.compile(r"vimeo\.com/(\d+)")

GOOGLE_MAPS_EMBED = (
    "https://www.google.com/maps/embed?pb=!1m18!1m12!1m3!1d3000!2d{lng}!3d{lat}"
    "!2m3!1f0!2f0!3f0!3m2!1i1024!2i768!4f13.1!3m3!1m2!1s0x0%3A0x0!2zM!5e0"
    "!3m2!1sen!2s!4v1000000000000!5m2!1sen!2s&z={zoom}"
)
PLACEHOLDER_MAP_EMBED = (
    "https://www.google.com/maps/embed?pb=!1m18!1m12!1m3!1d3651.902929594116"
    "!2d90.38935131498185!3d23.75086868458909!2m3!1f0!2f0!3f0!3m2!1i1024!2i768"
    "!4f13.1!3m3!1m2!1s0x0%3A0x0!2zMjPCsDQ1JzAzLjEiTiA5MMKwMjMnMjkuNCJF!5e0"
    "!3m2!1sen!2sbd!4v1000000000000!5m2!1sen!2sbd"
)


def video_embed_url(url: str) -> Optional[str]:
    """
    YouTube / Vimeo page URL -> player URL.
    Returns None for anything else (rendered as a plain <video>).
    """
    match = YOUTUBE_PATTERN.search(url)
    if match:
        return f"https://www.youtube.com/embed/{match.group(1)}"

    match = VIMEO_PATTERN.search(url)
    if match:
        return f"https://player.vimeo.com/video/{match.group(1)}"

    return None


def map_embed_url(*, embed_url=None, lat=None, lng=None, zoom=14) -> str:
    if embed_url:
        return embed_url
    if lat and lng:
        return GOOGLE_MAPS_EMBED.format(lat=lat, lng=lng, zoom=zoom or 14)
    return PLACEHOLDER_MAP_EMBED


def map_directions_url(*, address, button_link=None, lat=None, lng=None) -> str:
    if button_link:
        return button_link
    if lat and lng:
        return f"https://www.google.com/maps?q={lat},{lng}"
    query = quote(address, safe="!*'()")
    return f"https://www.google.com/maps/search/?api=1&query={query}"
