from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum


class IngredientKind(StrEnum):
    BUN_BOTTOM = "BUN_BOTTOM"
    PATTY = "PATTY"
    CHEESE = "CHEESE"
    LETTUCE = "LETTUCE"
    TOMATO = "TOMATO"
    ONION = "ONION"
    BUN_TOP = "BUN_TOP"


class IngredientShape(StrEnum):
    cylinder = "cylinder"
    box = "box"
    dome = "dome"
    irregular = "irregular"


@dataclass(frozen=True, slots=True)
class IngredientDefinition:
    kind: IngredientKind
    name: str
    color: str
    # Layer thickness; drives the vertical offset of everything stacked above it.
    height: float
    shape: IngredientShape
    radius: float | None = None


INGREDIENTS: dict[IngredientKind, IngredientDefinition] = {
    IngredientKind.BUN_BOTTOM: IngredientDefinition(
        IngredientKind.BUN_BOTTOM, "Bun Bottom", "#d97706", 0.4, IngredientShape.cylinder, radius=1.1
    ),
    IngredientKind.PATTY: IngredientDefinition(
        IngredientKind.PATTY, "Beef Patty", "#3e1c00", 0.3, IngredientShape.cylinder, radius=1.0
    ),
    IngredientKind.CHEESE: IngredientDefinition(
        IngredientKind.CHEESE, "Cheese", "#facc15", 0.05, IngredientShape.box, radius=1.1
    ),
    IngredientKind.LETTUCE: IngredientDefinition(
        IngredientKind.LETTUCE, "Lettuce", "#4ade80", 0.1, IngredientShape.irregular, radius=1.2
    ),
    IngredientKind.TOMATO: IngredientDefinition(
        IngredientKind.TOMATO, "Tomato", "#ef4444", 0.1, IngredientShape.cylinder, radius=0.9
    ),
    IngredientKind.ONION: IngredientDefinition(
        IngredientKind.ONION, "Onion", "#e5e7eb", 0.05, IngredientShape.cylinder, radius=0.8
    ),
    IngredientKind.BUN_TOP: IngredientDefinition(
        IngredientKind.BUN_TOP, "Bun Top", "#d97706", 0.6, IngredientShape.dome, radius=1.1
    ),
}

# Everything that may appear between the two bun halves of an order.
FILLINGS: tuple[IngredientKind, ...] = tuple(
    k for k in IngredientKind if k not in (IngredientKind.BUN_BOTTOM, IngredientKind.BUN_TOP)
)


def definition_of(kind: IngredientKind | str) -> IngredientDefinition:
    kind_ = IngredientKind(kind) if not isinstance(kind, IngredientKind) else kind
    return INGREDIENTS[kind_]


def catalog() -> list[IngredientDefinition]:
    return [INGREDIENTS[k] for k in IngredientKind]


def stack_offsets(kinds: Iterable[IngredientKind]) -> list[float]:
    """Vertical centre of each layer when the layers are stacked from y=0."""

    offsets: list[float] = []
    current = 0.0
    for kind in kinds:
        height = definition_of(kind).height
        offsets.append(current + height / 2)
        current += height
    return offsets
