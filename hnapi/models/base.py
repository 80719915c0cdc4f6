"""Base model classes shared by every API entity."""

from datetime import datetime
from typing import Any, Optional

import pendulum
from pydantic import BaseModel, ConfigDict, Field, model_validator


class HNModel(BaseModel):
    """Base model for all API entities.

    Entities are immutable snapshots: a fresh fetch is needed to observe
    changes. Fields the API adds later are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")


class ItemModel(HNModel):
    """Fields common to every item shape."""

    id: int = Field(..., description="The item's unique id")
    by: str = Field("", description="Username of the item's author")
    time: int = Field(0, description="Creation date, Unix time")
    timestamp: Optional[datetime] = Field(
        None, description="Creation date as a UTC datetime (derived from time)"
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_wire_timestamp(cls, data: Any) -> Any:
        """The API has no timestamp field; ignore one if it shows up."""
        if isinstance(data, dict) and "timestamp" in data:
            data = {k: v for k, v in data.items() if k != "timestamp"}
        return data

    @model_validator(mode="after")
    def _derive_timestamp(self) -> "ItemModel":
        # frozen model: bypass __setattr__ once, at decode time
        object.__setattr__(self, "timestamp", pendulum.from_timestamp(self.time, tz="UTC"))
        return self
