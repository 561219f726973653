from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from ..flowers.models import Flower
from .combination import build_combination
from .config import DEFAULT_RECOMMENDATION_CONFIG, RecommendationConfig
from .models import NoRecommendationFound, RecommendationRequest, RecommendationResponse
from .selection import select_flowers

logger = logging.getLogger(__name__)


def recommend(
    request: RecommendationRequest,
    catalog: Sequence[Flower],
    rng: random.Random | None = None,
    config: RecommendationConfig = DEFAULT_RECOMMENDATION_CONFIG,
) -> RecommendationResponse | NoRecommendationFound:
    """Select flowers for *request* and wrap them as a named combination.

    Returns :class:`NoRecommendationFound` instead of a combination when
    nothing in *catalog* qualifies.
    """
    include = request.include_flowers or []
    exclude = request.exclude_flowers or []

    selected = select_flowers(
        catalog, include, exclude, target=config.target_count, rng=rng,
    )
    if not selected:
        logger.info(
            "No recommendation for occasion=%s (catalog=%d, include=%s, exclude=%s)",
            request.occasion, len(catalog), include, exclude,
        )
        return NoRecommendationFound()

    return build_combination(selected, request, config)
