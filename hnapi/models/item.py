"""Generic item model: the superset of every item shape."""

from typing import Tuple

from pydantic import Field

from .base import ItemModel

STORY_ITEM = "story"
JOB_ITEM = "job"
ASK_ITEM = "ask"
COMMENT_ITEM = "comment"
POLL_ITEM = "poll"
POLLOPT_ITEM = "pollopt"

# job and ask items share the story shape
STORY_TYPES = frozenset({STORY_ITEM, JOB_ITEM, ASK_ITEM})


class Item(ItemModel):
    """Any item from the /item endpoint, before its variant is known.

    Which fields carry meaning depends on ``type``; the rest are left at
    their zero values and should not be relied upon.
    """

    deleted: bool = Field(False, description="True if the item is deleted")
    type: str = Field("", description="story, job, ask, comment, poll or pollopt")
    text: str = Field("", description="Comment, story or poll text (HTML)")
    dead: bool = Field(False, description="True if the item is dead")
    parent: int = Field(0, description="Parent comment or story (comments)")
    poll: int = Field(0, description="Owning poll (poll options)")
    kids: Tuple[int, ...] = Field((), description="Child comment ids, ranked display order")
    url: str = Field("", description="URL of the story")
    score: int = Field(0, description="Story score or poll option votes")
    title: str = Field("", description="Title of the story, poll or job (HTML)")
    parts: Tuple[int, ...] = Field((), description="Related poll option ids, display order")
    descendants: int = Field(0, description="Total comment count (stories, polls)")
