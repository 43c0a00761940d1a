from __future__ import annotations

import pytest

from localization import Localization, LocalizationLanguage, build_url


def test_lookup_by_key(localization: Localization, table_data: dict[str, str]) -> None:
    for key, value in table_data.items():
        assert localization.get_value_from_key(key) == value
    assert localization.get_value_from_key("tid_missing") is None


def test_reverse_lookup_returns_first_key(localization: Localization) -> None:
    assert localization.get_key_from_value("Gold Chest") == "tid_chest_gold"
    assert localization.get_key_from_value("Same") == "tid_duplicate_a"
    assert localization.get_key_from_value("gold chest") is None


def test_reverse_lookup_finds_matching_key(localization: Localization, table_data: dict[str, str]) -> None:
    for value in table_data.values():
        key = localization.get_key_from_value(value)
        assert key is not None
        assert table_data[key] == value


def test_templated_lookups(localization: Localization) -> None:
    assert localization.get_dragon_name(1000) == "Fire Dragon"
    assert localization.get_dragon_description(1000) == "Born in the volcano."
    assert localization.get_attack_name(7) == "Flame Burst"
    assert localization.get_skill_name(3) == "Revenge"
    assert localization.get_skill_description(3) == "Hits back after being hit."
    assert localization.get_dragon_description(1001) is None
    assert localization.get_attack_name(8) is None


def test_search_keys_preserves_order(localization: Localization, table_data: dict[str, str]) -> None:
    assert localization.search_keys("TID_UNIT_1000") == [
        "tid_unit_1000_name",
        "tid_unit_1000_description",
    ]
    assert localization.search_keys("") == list(table_data)


def test_search_values_ignores_case_and_accents(localization: Localization) -> None:
    assert localization.search_values("dragon") == ["Fire Dragon", "Dragón de Hielo"]
    assert localization.search_values("  LAVA ") == ["  Lava Island  "]


def test_search_values_with_options_disabled(localization: Localization) -> None:
    assert localization.search_values("dragon", lower_case=False) == []
    assert localization.search_values("Dragon", normalize_letters=False) == ["Fire Dragon"]
    assert localization.search_values("Island  ", trim_spaces=False) == ["  Lava Island  "]


def test_search_matches_exactly_the_normalized_substrings(localization: Localization) -> None:
    from localization.text import normalize_text

    for query in ["fire", "é", "tid_", "zzz", "1000"]:
        expected = [k for k in localization if normalize_text(query) in normalize_text(k)]
        assert localization.search_keys(query) == expected


def test_to_array_round_trip(localization: Localization, table_data: dict[str, str]) -> None:
    array = localization.to_array()
    assert array[0] == {"tid_unit_1000_name": "Fire Dragon"}
    assert all(len(item) == 1 for item in array)
    rebuilt = Localization.from_array(localization.language, array)
    assert dict(rebuilt.to_object()) == dict(localization.to_object()) == table_data


def test_table_is_read_only(table_data: dict[str, str]) -> None:
    localization = Localization("en", table_data)
    with pytest.raises(TypeError):
        localization.to_object()["tid_new"] = "x"  # type: ignore[index]

    table_data["tid_new"] = "x"
    assert "tid_new" not in localization


def test_container_protocol(localization: Localization) -> None:
    assert len(localization) == 11
    assert "tid_skill_name_3" in localization
    assert list(localization)[0] == "tid_unit_1000_name"


def test_url_follows_language() -> None:
    localization = Localization(LocalizationLanguage.SPANISH, {})
    assert localization.url == build_url("es")
    assert "dc_android_es_prod" in localization.url
