"""
Type definitions used across the examples
"""

from enum import StrEnum


class MessageType(StrEnum):
    # NOTE: closed set on purpose. The Open/Closed violation branches over exactly these members.
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
