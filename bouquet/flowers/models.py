from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Flower(BaseModel):
    """A single catalog entry. Immutable once loaded."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    flower_id: str
    name: str
    image_url: str
    meaning: str
    color: str
    season: str


class FlowerSummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    flower_id: str
    name: str
