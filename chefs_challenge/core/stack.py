from __future__ import annotations

from dataclasses import dataclass, field

from chefs_challenge.ingredients import IngredientKind


@dataclass(slots=True)
class StackEditor:
    """The player's in-progress burger plus a linear redo history.

    - `append` starts a new branch, so the redo history is dropped.
    - `undo` moves the top layer to the front of the redo buffer.
    - `redo` moves the front of the redo buffer back on top; the rest of the buffer stays.

    Empty-stack undo and empty-buffer redo are no-ops.
    """

    _stack: list[IngredientKind] = field(default_factory=list)
    _redo: list[IngredientKind] = field(default_factory=list)

    @property
    def stack(self) -> tuple[IngredientKind, ...]:
        return tuple(self._stack)

    @property
    def redo_buffer(self) -> tuple[IngredientKind, ...]:
        return tuple(self._redo)

    @property
    def can_undo(self) -> bool:
        return bool(self._stack)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def append(self, kind: IngredientKind) -> None:
        self._stack.append(kind)
        self._redo.clear()

    def undo(self) -> None:
        if not self._stack:
            return
        self._redo.insert(0, self._stack.pop())

    def redo(self) -> None:
        if not self._redo:
            return
        self._stack.append(self._redo.pop(0))

    def reset(self) -> None:
        self._stack.clear()
        self._redo.clear()
