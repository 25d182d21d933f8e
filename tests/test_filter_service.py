"""Tests for catalog filtering."""

import pandas as pd

from adoption_catalog.services.filter_service import (
    AnimalFilters,
    animal_matches,
    filter_animals,
    filters_signature,
    records_to_frame,
    variety_options,
)

CAT = {
    "animal_id": 1,
    "animal_place": "臺北市動物之家",
    "animal_kind": "貓",
    "animal_sex": "F",
    "animal_colour": "虎斑 色",
    "animal_bodytype": "SMALL",
    "animal_Variety": "混種貓",
}
DOG = {
    "animal_id": 2,
    "animal_place": "新北市板橋區公立動物之家",
    "animal_kind": "狗",
    "animal_sex": "M",
    "animal_colour": "黑白",
    "animal_bodytype": "MEDIUM",
    "animal_Variety": "米克斯/柴犬",
}
RABBIT = {
    "animal_id": 3,
    "animal_place": "臺中市動物之家南屯園區",
    "animal_kind": "其他",
    "animal_sex": "N",
    "animal_colour": "茶色",
    "animal_bodytype": "SMALL",
    "animal_Variety": "兔、垂耳",
}


def ids(dataframe):
    return dataframe["animal_id"].tolist()


class TestAnimalMatches:
    def test_empty_filters_match_everything(self):
        assert all(animal_matches(animal, AnimalFilters()) for animal in (CAT, DOG, RABBIT))

    def test_area_is_substring_of_place(self):
        assert animal_matches(CAT, AnimalFilters(area="臺北市"))
        assert not animal_matches(DOG, AnimalFilters(area="臺北市"))

    def test_type_cat_dog_other(self):
        assert animal_matches(CAT, AnimalFilters(type="貓"))
        assert not animal_matches(DOG, AnimalFilters(type="貓"))
        assert animal_matches(DOG, AnimalFilters(type="狗"))
        assert animal_matches(RABBIT, AnimalFilters(type="其他"))
        assert not animal_matches(CAT, AnimalFilters(type="其他"))

    def test_sex_maps_to_feed_codes(self):
        assert animal_matches(CAT, AnimalFilters(sex="母"))
        assert animal_matches(DOG, AnimalFilters(sex="公"))
        assert animal_matches(RABBIT, AnimalFilters(sex="未知"))
        assert not animal_matches(CAT, AnimalFilters(sex="公"))

    def test_color_uses_keyword_table(self):
        assert animal_matches(CAT, AnimalFilters(color="虎斑"))
        assert animal_matches(DOG, AnimalFilters(color="黑色"))
        assert animal_matches(DOG, AnimalFilters(color="白色"))
        assert animal_matches(RABBIT, AnimalFilters(color="棕色"))
        assert not animal_matches(CAT, AnimalFilters(color="黑色"))

    def test_unknown_color_matches_literally(self):
        assert animal_matches(CAT, AnimalFilters(color="斑色"))
        assert not animal_matches(DOG, AnimalFilters(color="金"))

    def test_bodytype_and_variety_ignore_case_and_spaces(self):
        assert animal_matches(CAT, AnimalFilters(bodytype="small"))
        assert animal_matches(DOG, AnimalFilters(variety="柴 犬"))
        assert not animal_matches(CAT, AnimalFilters(variety="柴犬"))

    def test_all_conditions_are_combined(self):
        assert animal_matches(CAT, AnimalFilters(area="臺北", type="貓", sex="母"))
        assert not animal_matches(CAT, AnimalFilters(area="臺北", type="狗"))

    def test_missing_fields_do_not_match_active_filter(self):
        assert not animal_matches({"animal_id": 9}, AnimalFilters(area="臺北市"))
        assert animal_matches({"animal_id": 9}, AnimalFilters(type="其他"))


class TestFilterAnimals:
    def test_preserves_row_order(self):
        frame = records_to_frame([RABBIT, CAT, DOG])
        assert ids(filter_animals(frame, AnimalFilters(bodytype="SMALL"))) == ["3", "1"]

    def test_empty_frame_returns_empty(self):
        assert filter_animals(pd.DataFrame(), AnimalFilters(type="貓")).empty

    def test_no_match_returns_empty(self):
        frame = records_to_frame([CAT, DOG])
        assert filter_animals(frame, AnimalFilters(area="金門縣")).empty


class TestFilterOptions:
    def test_from_selections_treats_all_as_empty(self):
        filters = AnimalFilters.from_selections({"area": "全部", "type": "貓", "sex": None})
        assert filters == AnimalFilters(type="貓")
        assert AnimalFilters.from_selections({"area": "全部"}).is_empty()

    def test_variety_options_split_and_sorted(self):
        frame = records_to_frame([CAT, DOG, RABBIT])
        assert variety_options(frame) == ["全部", *sorted(["混種貓", "米克斯", "柴犬", "兔", "垂耳"])]

    def test_variety_options_empty_feed(self):
        assert variety_options(pd.DataFrame()) == []

    def test_signature_changes_with_filters(self):
        assert filters_signature(AnimalFilters()) == filters_signature(AnimalFilters())
        assert filters_signature(AnimalFilters(type="貓")) != filters_signature(AnimalFilters())
