from __future__ import annotations

import pytest

from chefs_challenge.ingredients import (
    FILLINGS,
    INGREDIENTS,
    IngredientKind,
    IngredientShape,
    catalog,
    definition_of,
    stack_offsets,
)


def test_every_kind_has_one_positive_height_definition() -> None:
    assert set(INGREDIENTS) == set(IngredientKind)
    for kind, d in INGREDIENTS.items():
        assert d.kind == kind
        assert d.height > 0


def test_fillings_exclude_buns() -> None:
    assert IngredientKind.BUN_BOTTOM not in FILLINGS
    assert IngredientKind.BUN_TOP not in FILLINGS
    assert len(FILLINGS) == 5


def test_definition_of_accepts_raw_values() -> None:
    assert definition_of("CHEESE").shape == IngredientShape.box
    assert definition_of(IngredientKind.BUN_TOP).shape == IngredientShape.dome


def test_definition_of_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        definition_of("PICKLE")


def test_catalog_is_in_enum_order() -> None:
    assert [d.kind for d in catalog()] == list(IngredientKind)


def test_stack_offsets_centre_each_layer() -> None:
    offsets = stack_offsets([IngredientKind.BUN_BOTTOM, IngredientKind.PATTY, IngredientKind.BUN_TOP])
    assert offsets == pytest.approx([0.2, 0.55, 1.0])
    assert stack_offsets([]) == []
