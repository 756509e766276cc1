"""Tests for recommendation grouping."""

from shamba.core.types import (
    CropRecommendation,
    LivestockRecommendation,
    LivestockRecord,
    PastureRecommendation,
    PastureRecord,
)
from shamba.pipeline.grouping import (
    group_crops_by_type,
    group_crops_by_type_and_name,
    group_livestock_by_type,
    group_pasture_by_type,
)
from tests.factories import make_crop


def _crop_rec(crop_type: str, crop: str, variety: str, score: int) -> CropRecommendation:
    return CropRecommendation(
        crop=make_crop(crop_type=crop_type, crop=crop, variety=variety),
        suitability_score=score,
    )


RANKED = [
    _crop_rec("Cereal", "Maize", "H614D", 94),
    _crop_rec("Legume", "Beans", "Rosecoco", 90),
    _crop_rec("Cereal", "Sorghum", "Gadam", 85),
    _crop_rec("Cereal", "Maize", "DH04", 70),
]


class TestGroupCrops:
    def test_two_level_grouping(self):
        groups = group_crops_by_type_and_name(RANKED)

        assert list(groups) == ["Cereal", "Legume"]
        assert list(groups["Cereal"]) == ["Maize", "Sorghum"]
        assert [r.crop.variety for r in groups["Cereal"]["Maize"]] == ["H614D", "DH04"]
        assert [r.crop.variety for r in groups["Legume"]["Beans"]] == ["Rosecoco"]

    def test_within_bucket_order_is_not_resorted(self):
        reversed_input = list(reversed(RANKED))
        groups = group_crops_by_type_and_name(reversed_input)
        assert [r.crop.variety for r in groups["Cereal"]["Maize"]] == ["DH04", "H614D"]

    def test_one_level_grouping(self):
        groups = group_crops_by_type(RANKED)
        assert [r.crop.variety for r in groups["Cereal"]] == ["H614D", "Gadam", "DH04"]

    def test_empty_input(self):
        assert group_crops_by_type_and_name([]) == {}
        assert group_crops_by_type([]) == {}


class TestGroupLivestockAndPasture:
    def test_livestock_by_type(self):
        recs = [
            LivestockRecommendation(LivestockRecord("Dairy Cattle", "Friesian", "zone III"), 100, True, "zone III"),
            LivestockRecommendation(LivestockRecord("Goats", "Toggenburg", "zone III"), 100, True, "zone III"),
            LivestockRecommendation(LivestockRecord("Dairy Cattle", "Ayrshire", "zone III"), 100, True, "zone III"),
        ]
        groups = group_livestock_by_type(recs)
        assert list(groups) == ["Dairy Cattle", "Goats"]
        assert [r.livestock.breed for r in groups["Dairy Cattle"]] == ["Friesian", "Ayrshire"]

    def test_pasture_by_category(self):
        recs = [
            PastureRecommendation(PastureRecord("Grass", "Napier grass", "Kakamega 1", "zone III"), 100, True, "zone III"),
            PastureRecommendation(PastureRecord("Legume", "Desmodium", "Silverleaf", "zone III"), 100, True, "zone III"),
        ]
        groups = group_pasture_by_type(recs)
        assert {k: len(v) for k, v in groups.items()} == {"Grass": 1, "Legume": 1}
