from __future__ import annotations

import pytest

from bouquet.flowers.models import Flower
from bouquet.recommendations.combination import build_combination, combination_id
from bouquet.recommendations.config import RecommendationConfig
from bouquet.recommendations.models import RecommendationRequest


def _flower(fid: str, name: str) -> Flower:
    return Flower(
        flower_id=fid,
        name=name,
        image_url=f"/images/{fid}.jpg",
        meaning=f"{name} meaning",
        color="WHITE",
        season="SUMMER",
    )


ROSE = _flower("F1", "장미")
TULIP = _flower("F2", "튤립")
LILY = _flower("F3", "백합")

REQUEST = RecommendationRequest(
    occasion="생일", recipient="FRIEND", mood="BRIGHT", size="M",
)


def test_combination_id_joins_ids_in_order():
    assert combination_id([ROSE, TULIP, LILY]) == "combo_F1_F2_F3"
    assert combination_id([LILY, ROSE]) == "combo_F3_F1"


def test_combination_id_is_deterministic():
    assert combination_id([TULIP, ROSE]) == combination_id([TULIP, ROSE])


def test_build_names_after_first_flower():
    combo = build_combination([TULIP, ROSE], REQUEST)
    assert combo.combination_id == "combo_F2_F1"
    assert combo.combination_name == "튤립을(를) 위한 조합"
    assert combo.description == "생일을(를) 위한 특별한 꽃 조합입니다."
    assert combo.combination_image_url == "/images/F2.jpg"


def test_build_projects_flower_info():
    combo = build_combination([ROSE, LILY], REQUEST)
    assert [f.flower_id for f in combo.flowers] == ["F1", "F3"]
    dumped = combo.model_dump(by_alias=True)
    assert dumped["flowers"][0] == {
        "flowerId": "F1",
        "name": "장미",
        "imageUrl": "/images/F1.jpg",
        "meaning": "장미 meaning",
    }


def test_build_uses_config_templates():
    config = RecommendationConfig(
        id_prefix="set-",
        id_separator="+",
        name_template="For {name}",
        description_template="A {occasion} bouquet",
    )
    combo = build_combination([ROSE, TULIP], REQUEST, config)
    assert combo.combination_id == "set-F1+F2"
    assert combo.combination_name == "For 장미"
    assert combo.description == "A 생일 bouquet"


def test_build_rejects_empty_selection():
    with pytest.raises(ValueError):
        build_combination([], REQUEST)
