from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable

from statemachine.exceptions import TransitionNotAllowed

from chefs_challenge.agents.narrator import FAILURE_FALLBACK, Narrator, success_fallback
from chefs_challenge.api.models import FailureReason, Screen, SessionState
from chefs_challenge.config import GameSettings
from chefs_challenge.core.orders import generate_order, order_matches
from chefs_challenge.core.scoring import calculate_bonus, record_high_score
from chefs_challenge.core.stack import StackEditor
from chefs_challenge.countdown import Countdown
from chefs_challenge.fsm import SessionFSM
from chefs_challenge.ingredients import IngredientKind

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionState], None]


class SessionStateError(ValueError):
    pass


class SessionController:
    """Single-player game session: screens, countdown, scoring and narrative text.

    All mutators are synchronous and run on the event loop thread, so each call is
    one atomic mutation. The countdown and narrative requests are asyncio tasks whose
    completions re-enter through the same mutation path.

    Narrative requests are tagged with the transition generation they were issued
    for; a result arriving after the session has moved on is dropped.
    """

    def __init__(
        self,
        *,
        narrator: Narrator,
        settings: GameSettings | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        self._settings = settings or GameSettings()

        if rng is None:
            if seed is None:
                seed = self._settings.seed
            if seed is None:
                seed = random.SystemRandom().randint(1, 2**31 - 1)
            rng = random.Random(seed)
        self._rng = rng
        self._narrator = narrator

        self._state = SessionState(time_left=self._settings.start_time, seed=seed)
        self._editor = StackEditor()
        self._countdown = Countdown(interval=self._settings.tick_seconds, on_tick=self._on_tick)
        self._fsm = SessionFSM(self._state, countdown=self._countdown)

        self._generation = 0
        self._listeners: list[SessionListener] = []
        self._narrative_tasks: set[asyncio.Task[None]] = set()

    # ---- read side ----

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def timer_running(self) -> bool:
        return self._countdown.running

    def snapshot(self) -> SessionState:
        snap = self._state.model_copy(deep=True)
        snap.player_stack = list(self._editor.stack)
        snap.redo_stack = list(self._editor.redo_buffer)
        return snap

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unregisters it."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    async def wait_for_narrative(self) -> None:
        """Wait until every in-flight narrative request has resolved."""

        while self._narrative_tasks:
            await asyncio.gather(*list(self._narrative_tasks))

    def close(self) -> None:
        self._countdown.cancel()
        for task in list(self._narrative_tasks):
            task.cancel()

    # ---- intents ----

    def start(self) -> SessionState:
        self._transition("shift_started")

        s = self._state
        s.level = 1
        s.score = 0
        s.badges = 0
        s.time_left = self._settings.start_time
        s.feedback_message = ""
        s.last_bonus = None
        s.failure_reason = None
        self._editor.reset()
        s.current_order = list(generate_order(1, rng=self._rng))

        logger.info("Shift started (order of %d layers)", len(s.current_order))
        return self._changed()

    def append_ingredient(self, kind: IngredientKind) -> SessionState:
        self._require_playing("append_ingredient")
        self._editor.append(kind)
        return self._changed()

    def undo(self) -> SessionState:
        self._require_playing("undo")
        self._editor.undo()
        return self._changed()

    def redo(self) -> SessionState:
        self._require_playing("redo")
        self._editor.redo()
        return self._changed()

    def reset_stack(self) -> SessionState:
        self._require_playing("reset_stack")
        self._editor.reset()
        return self._changed()

    def submit(self) -> SessionState:
        self._require_playing("submit")

        if order_matches(self._editor.stack, self._state.current_order):
            self._complete_level()
        else:
            self._fail(FailureReason.wrong_order)
        return self._changed()

    def next_level(self) -> SessionState:
        self._transition("level_advanced")

        s = self._state
        s.level += 1
        s.time_left = self._settings.time_for_level(s.level)
        s.feedback_message = ""
        s.last_bonus = None
        self._editor.reset()
        s.current_order = list(generate_order(s.level, rng=self._rng))

        logger.info("Advanced to level %d with %ds on the clock", s.level, s.time_left)
        return self._changed()

    def return_to_menu(self) -> SessionState:
        self._transition("returned_to_menu")
        logger.info("Returned to menu")
        return self._changed()

    # ---- internals ----

    def _require_playing(self, action: str) -> None:
        if self._state.screen != Screen.PLAYING:
            raise SessionStateError(f"Action '{action}' not allowed on screen '{self._state.screen.value}'")

    def _transition(self, event: str) -> None:
        try:
            self._fsm.send(event)
        except TransitionNotAllowed as e:
            raise SessionStateError(f"Action '{event}' not allowed on screen '{self._state.screen.value}'") from e
        self._fsm.sync_screen_to_model()

        # Any pending narrative belongs to the screen we just left.
        self._generation += 1
        self._state.narrative_pending = False

    def _complete_level(self) -> None:
        s = self._state
        level, bonus = s.level, calculate_bonus(s.time_left, s.level)
        self._transition("order_served")

        s.score += bonus
        s.badges += 1
        s.last_bonus = bonus
        logger.info("Level %d complete: bonus=%d score=%d", level, bonus, s.score)

        self._request_narrative(
            lambda: self._narrator.request_success_notice(level=level, bonus=bonus),
            fallback=success_fallback(bonus),
        )

    def _fail(self, reason: FailureReason) -> None:
        s = self._state
        level, score = s.level, s.score
        self._transition("order_failed")

        s.failure_reason = reason
        s.high_scores = record_high_score(s.high_scores, score, limit=self._settings.high_score_limit)
        logger.info("Game over at level %d (%s): score=%d", level, reason.value, score)

        self._request_narrative(
            lambda: self._narrator.request_failure_notice(level=level, score=score, reason=reason.value),
            fallback=FAILURE_FALLBACK,
        )

    def _on_tick(self) -> None:
        s = self._state
        if s.screen != Screen.PLAYING:
            return
        s.time_left = max(0, s.time_left - 1)
        if s.time_left == 0:
            self._fail(FailureReason.time_expired)
        self._changed()

    def _request_narrative(self, request: Callable[[], Awaitable[str]], *, fallback: str) -> None:
        self._state.narrative_pending = True
        token = self._generation
        task = asyncio.get_running_loop().create_task(self._resolve_narrative(request, fallback=fallback, token=token))
        self._narrative_tasks.add(task)
        task.add_done_callback(self._narrative_tasks.discard)

    async def _resolve_narrative(self, request: Callable[[], Awaitable[str]], *, fallback: str, token: int) -> None:
        try:
            text = await request()
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.warning("Narrative request failed; using fallback text", exc_info=True)
            text = fallback

        if token != self._generation:
            logger.debug("Discarding stale narrative (generation %d, now %d)", token, self._generation)
            return

        self._state.feedback_message = text
        self._state.narrative_pending = False
        self._changed()

    def _changed(self) -> SessionState:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)
        return snap
