from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RecommendationRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    occasion: str = Field(..., min_length=1)
    recipient: str = Field(..., min_length=1)
    mood: str = Field(..., min_length=1)
    size: str = Field(..., min_length=1)
    include_flowers: list[str] | None = Field(
        default_factory=list,
        description="Flower ids forced into the combination, in priority order",
    )
    exclude_flowers: list[str] | None = Field(
        default_factory=list,
        description="Flower ids never drawn by the random fill",
    )


class FlowerInfo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    flower_id: str
    name: str
    image_url: str
    meaning: str


class RecommendationResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    combination_id: str
    combination_name: str
    description: str
    combination_image_url: str
    flowers: list[FlowerInfo]


@dataclass(frozen=True)
class NoRecommendationFound:
    """No flower qualified for the request."""
