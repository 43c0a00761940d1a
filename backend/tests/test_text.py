from __future__ import annotations

import pytest

from localization.text import NormalizeTextOptions, normalize_text


def test_normalize_defaults_fold_case_accents_and_spaces() -> None:
    assert normalize_text("  Dragón de HIELO ") == "dragon de hielo"


def test_normalize_steps_are_independent() -> None:
    text = "  Ñandú "
    assert normalize_text(text, NormalizeTextOptions(lower_case=False)) == "Nandu"
    assert normalize_text(text, NormalizeTextOptions(normalize_letters=False)) == "ñandú"
    assert normalize_text(text, NormalizeTextOptions(trim_spaces=False)) == "  nandu "
    assert normalize_text(text, NormalizeTextOptions(False, False, False)) == text


@pytest.mark.parametrize("text", ["Café Crème", "  ÀÉÎÕÜ  ", "plain", "", "Ça\tva "])
def test_normalize_is_idempotent(text: str) -> None:
    once = normalize_text(text)
    assert normalize_text(once) == once
