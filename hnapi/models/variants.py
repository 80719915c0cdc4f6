"""Typed item variants and the tagged union over them."""

from typing import Annotated, Literal, Tuple, Union

from pydantic import Field

from .base import ItemModel


class Story(ItemModel):
    """A submitted story. Job and ask items share this shape."""

    type: Literal["story", "job", "ask"] = Field(..., description="story, job or ask")
    score: int = Field(0, description="The story's score")
    title: str = Field("", description="Title of the story (HTML)")
    url: str = Field("", description="URL of the story")
    kids: Tuple[int, ...] = Field((), description="Top-level comment ids")
    descendants: int = Field(0, description="Total comment count")


class Comment(ItemModel):
    """A comment on a story, poll or another comment."""

    type: Literal["comment"] = Field(..., description="Always comment")
    text: str = Field("", description="Comment text (HTML)")
    parent: int = Field(0, description="Parent comment or story id")
    kids: Tuple[int, ...] = Field((), description="Reply ids")


class Poll(ItemModel):
    """A poll. Its options are referenced by id through ``parts``."""

    type: Literal["poll"] = Field(..., description="Always poll")
    score: int = Field(0, description="The poll's score")
    title: str = Field("", description="Title of the poll (HTML)")
    text: str = Field("", description="Poll text (HTML)")
    kids: Tuple[int, ...] = Field((), description="Top-level comment ids")
    parts: Tuple[int, ...] = Field((), description="Poll option ids, display order")
    descendants: int = Field(0, description="Total comment count")


class PollOpt(ItemModel):
    """One option of a poll."""

    type: Literal["pollopt"] = Field(..., description="Always pollopt")
    score: int = Field(0, description="Votes for this option")
    text: str = Field("", description="Option text (HTML)")
    poll: int = Field(0, description="Owning poll id")


Variant = Annotated[Union[Story, Comment, Poll, PollOpt], Field(discriminator="type")]
