from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RecommendationConfig:
    target_count: int = 3
    id_prefix: str = "combo_"
    id_separator: str = "_"
    name_template: str = "{name}을(를) 위한 조합"
    description_template: str = "{occasion}을(를) 위한 특별한 꽃 조합입니다."


DEFAULT_RECOMMENDATION_CONFIG = RecommendationConfig()
