from __future__ import annotations

from statemachine import State, StateMachine

from chefs_challenge.api.models import Screen, SessionState
from chefs_challenge.countdown import Countdown


class SessionFSM(StateMachine):
    """FSM wrapper around SessionState.

    - screens: menu -> playing -> (level_end -> playing)* -> game_over -> menu
    - the controller applies score/level changes; the FSM guards transitions and
      owns the countdown lifecycle: it runs exactly while in `playing`.
    """

    menu = State(Screen.MENU.value, value=Screen.MENU.value, initial=True)
    playing = State(Screen.PLAYING.value, value=Screen.PLAYING.value)
    level_end = State(Screen.LEVEL_END.value, value=Screen.LEVEL_END.value)
    game_over = State(Screen.GAME_OVER.value, value=Screen.GAME_OVER.value)

    shift_started = menu.to(playing)
    order_served = playing.to(level_end)
    order_failed = playing.to(game_over)
    level_advanced = level_end.to(playing)
    returned_to_menu = game_over.to(menu)

    def __init__(self, session: SessionState, *, countdown: Countdown):
        self.session = session
        self.countdown = countdown
        super().__init__(start_value=session.screen.value)

    def on_enter_playing(self) -> None:
        self.countdown.start()

    def on_exit_playing(self) -> None:
        self.countdown.cancel()

    def sync_screen_to_model(self) -> None:
        self.session.screen = Screen(str(self.current_state.value))
