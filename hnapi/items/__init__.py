"""Item decoding and typed dispatch."""

from .convert import to_comment, to_poll, to_poll_opt, to_story
from .resolver import decode_generic, describe_validation_error, is_null, resolve

__all__ = [
    "resolve",
    "decode_generic",
    "to_story",
    "to_comment",
    "to_poll",
    "to_poll_opt",
    "is_null",
    "describe_validation_error",
]
