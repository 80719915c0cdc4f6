"""Client for the read-only Hacker News Firebase API."""

import logging

from .api import HNClient, StoryList, Transport
from .config import ClientConfig
from .errors import (
    BodyReadError,
    HNAPIError,
    MalformedPayload,
    NotFound,
    TransportError,
    TypeMismatch,
    UnexpectedStatus,
    UnknownItemType,
)
from .items import decode_generic, resolve, to_comment, to_poll, to_poll_opt, to_story
from .models import Comment, Item, Poll, PollOpt, Story, Update, User, Variant
from .version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "HNClient",
    "StoryList",
    "Transport",
    "ClientConfig",
    "Item",
    "Story",
    "Comment",
    "Poll",
    "PollOpt",
    "Variant",
    "User",
    "Update",
    "resolve",
    "decode_generic",
    "to_story",
    "to_comment",
    "to_poll",
    "to_poll_opt",
    "HNAPIError",
    "TransportError",
    "UnexpectedStatus",
    "BodyReadError",
    "MalformedPayload",
    "NotFound",
    "UnknownItemType",
    "TypeMismatch",
    "__version__",
]
