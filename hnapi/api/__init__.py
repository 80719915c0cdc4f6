"""HTTP transport and the API client facade."""

from .client import HNClient, StoryList
from .transport import Transport

__all__ = ["HNClient", "StoryList", "Transport"]
