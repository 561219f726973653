from __future__ import annotations

from collections.abc import Sequence

from ..flowers.models import Flower
from .config import DEFAULT_RECOMMENDATION_CONFIG, RecommendationConfig
from .models import FlowerInfo, RecommendationRequest, RecommendationResponse


def combination_id(
    flowers: Sequence[Flower],
    config: RecommendationConfig = DEFAULT_RECOMMENDATION_CONFIG,
) -> str:
    return config.id_prefix + config.id_separator.join(f.flower_id for f in flowers)


def build_combination(
    selected: Sequence[Flower],
    request: RecommendationRequest,
    config: RecommendationConfig = DEFAULT_RECOMMENDATION_CONFIG,
) -> RecommendationResponse:
    """Name and describe a non-empty flower selection."""
    if not selected:
        raise ValueError("Cannot build a combination from an empty selection")

    first = selected[0]
    return RecommendationResponse(
        combination_id=combination_id(selected, config),
        combination_name=config.name_template.format(name=first.name),
        description=config.description_template.format(occasion=request.occasion),
        combination_image_url=first.image_url,
        flowers=[
            FlowerInfo(
                flower_id=f.flower_id,
                name=f.name,
                image_url=f.image_url,
                meaning=f.meaning,
            )
            for f in selected
        ],
    )
