"""Change feed model."""

from typing import FrozenSet

from pydantic import Field

from .base import HNModel


class Update(HNModel):
    """Item and profile changes since the previous snapshot."""

    items: FrozenSet[int] = Field(default_factory=frozenset, description="Changed item ids")
    profiles: FrozenSet[str] = Field(default_factory=frozenset, description="Changed user handles")
