"""Client for the Hacker News Firebase API.

Each operation issues exactly one request through the transport and feeds
the body to the item resolver or a plain list/scalar decode. Failures keep
their original type; the client only records which operation (and id) was
running before re-raising.
"""

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Any, Callable, Iterator, List, Optional, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from ..config import ClientConfig
from ..errors import HNAPIError, MalformedPayload, NotFound
from ..items import (
    decode_generic,
    describe_validation_error,
    is_null,
    resolve,
    to_comment,
    to_poll,
    to_poll_opt,
    to_story,
)
from ..models import Comment, Item, Poll, PollOpt, Story, Update, User, Variant
from .transport import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")

ItemID = Union[int, str]

_id_list_adapter: TypeAdapter = TypeAdapter(List[int])
_int_adapter: TypeAdapter = TypeAdapter(int)
_user_adapter: TypeAdapter = TypeAdapter(User)
_update_adapter: TypeAdapter = TypeAdapter(Update)


class StoryList(str, Enum):
    """Ranked story lists exposed by the API."""

    # up to 500 stories for top and new
    TOP = "topstories"
    NEW = "newstories"
    BEST = "beststories"
    SHOW = "showstories"
    JOB = "jobstories"


@contextmanager
def _operation(name: str, target: Optional[Any] = None) -> Iterator[None]:
    """Tag any client error raised inside the block with the operation."""
    try:
        yield
    except HNAPIError as e:
        if e.operation is None:
            e.operation = name
            e.target = None if target is None else str(target)
        logger.debug("%s failed: %s", name, e)
        raise


def _decode(raw: bytes, adapter: TypeAdapter, kind: str) -> Any:
    """Decode a non-item body, treating ``null`` as a missing record."""
    if is_null(raw):
        raise NotFound(kind)
    try:
        return adapter.validate_json(raw)
    except ValidationError as e:
        raise MalformedPayload(describe_validation_error(e)) from e


class HNClient:
    """Hacker News API client bound to one immutable configuration."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        """Initialize client; builds a Transport from ``config`` if none is given."""
        self.config = config if config is not None else ClientConfig()
        self.transport = transport if transport is not None else Transport(
            user_agent=self.config.user_agent
        )

    def _url(self, path: str) -> str:
        """URL for an API path like .../v0/<path>.json."""
        return f"{self.config.base_url}/{path}.json"

    def _obj_url(self, obj: str, obj_id: ItemID) -> str:
        """URL for an API path like .../v0/<obj>/<id>.json."""
        return self._url(f"{obj}/{obj_id}")

    def item_by_id(self, item_id: ItemID) -> Variant:
        """Get an item and return it as Story, Comment, Poll or PollOpt."""
        with _operation("item_by_id", item_id):
            return resolve(self.transport.get(self._obj_url("item", item_id)))

    def generic_item_by_id(self, item_id: ItemID) -> Item:
        """Get an item as the generic superset model."""
        with _operation("generic_item_by_id", item_id):
            return decode_generic(self.transport.get(self._obj_url("item", item_id)))

    def _narrowed(self, name: str, item_id: ItemID, convert: Callable[[Item], T]) -> T:
        with _operation(name, item_id):
            item = decode_generic(self.transport.get(self._obj_url("item", item_id)))
            return convert(item)

    def story_by_id(self, item_id: ItemID) -> Story:
        """Get a story, job or ask item; TypeMismatch for anything else."""
        return self._narrowed("story_by_id", item_id, to_story)

    def comment_by_id(self, item_id: ItemID) -> Comment:
        """Get a comment item; TypeMismatch for anything else."""
        return self._narrowed("comment_by_id", item_id, to_comment)

    def poll_by_id(self, item_id: ItemID) -> Poll:
        """Get a poll item; TypeMismatch for anything else."""
        return self._narrowed("poll_by_id", item_id, to_poll)

    def poll_opt_by_id(self, item_id: ItemID) -> PollOpt:
        """Get a poll option item; TypeMismatch for anything else."""
        return self._narrowed("poll_opt_by_id", item_id, to_poll_opt)

    def user_by_id(self, user_id: str) -> User:
        """Get a user profile by its case-sensitive handle."""
        with _operation("user_by_id", user_id):
            return _decode(self.transport.get(self._obj_url("user", user_id)), _user_adapter, "user")

    def top_ids(self, category: StoryList = StoryList.TOP) -> List[int]:
        """Get the ids of a ranked story list, in the API's order."""
        category = StoryList(category)
        with _operation("top_ids", category.value):
            return _decode(self.transport.get(self._url(category.value)), _id_list_adapter, category.value)

    def max_id(self) -> int:
        """Get the current largest item id.

        Walking backwards from here reaches every item.
        """
        with _operation("max_id"):
            return _decode(self.transport.get(self._url("maxitem")), _int_adapter, "maxitem")

    def updates(self) -> Update:
        """Get the latest item and profile changes."""
        with _operation("updates"):
            return _decode(self.transport.get(self._url("updates")), _update_adapter, "updates")

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()

    def __enter__(self) -> "HNClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
