from __future__ import annotations

import pytest

from localization import Localization, LocalizationLanguage


@pytest.fixture
def table_data() -> dict[str, str]:
    return {
        "tid_unit_1000_name": "Fire Dragon",
        "tid_unit_1000_description": "Born in the volcano.",
        "tid_unit_1001_name": "Dragón de Hielo",
        "tid_attack_name_7": "Flame Burst",
        "tid_skill_name_3": "Revenge",
        "tid_skill_description_3": "Hits back after being hit.",
        "tid_chest_gold": "Gold Chest",
        "tid_type_fire": "Fire",
        "tid_island_lava": "  Lava Island  ",
        "tid_duplicate_a": "Same",
        "tid_duplicate_b": "Same",
    }


@pytest.fixture
def localization(table_data: dict[str, str]) -> Localization:
    return Localization(LocalizationLanguage.ENGLISH, table_data)
