from __future__ import annotations

from chefs_challenge.agents.narrator import AgentNarrator
from chefs_challenge.config import GameSettings, settings_from_env
from chefs_challenge.session import SessionController


_CONTROLLER: SessionController | None = None


def init_controller(*, settings: GameSettings | None = None) -> SessionController:
    """Create the process-wide session once and cache it.

    Safe to call multiple times; subsequent calls return the existing instance.
    """

    global _CONTROLLER
    if _CONTROLLER is None:
        _CONTROLLER = SessionController(narrator=AgentNarrator(), settings=settings or settings_from_env())
    return _CONTROLLER


def reset_controller_for_tests() -> None:
    global _CONTROLLER
    if _CONTROLLER is not None:
        _CONTROLLER.close()
    _CONTROLLER = None


def get_controller() -> SessionController:
    if _CONTROLLER is None:
        raise RuntimeError("Session not initialized. Call init_controller() at startup.")
    return _CONTROLLER
