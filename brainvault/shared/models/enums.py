"""
Enums used across the application.
"""

from enum import Enum


class ContentType(str, Enum):
    """Kind of link a user saved."""

    AUDIO = "audio"
    ARTICLE = "article"
    TWITTER = "twitter"
    YOUTUBE = "youtube"
