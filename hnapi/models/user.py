"""User profile model."""

from typing import Tuple

from pydantic import Field

from .base import HNModel


class User(HNModel):
    """A user profile from the /user endpoint."""

    id: str = Field(..., description="The user's case-sensitive handle")
    about: str = Field("", description="Self-description (HTML)")
    created: int = Field(0, description="Creation date, Unix time")
    karma: int = Field(0, description="The user's karma")
    delay: int = Field(0, description="Minutes before comments become visible")
    submitted: Tuple[int, ...] = Field((), description="Ids of submitted stories, polls and comments")
