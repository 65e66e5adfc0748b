from __future__ import annotations

import asyncio
import os
import random
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from chefs_challenge.config import GameSettings
from chefs_challenge.session import SessionController


@pytest.fixture(scope="session", autouse=True)
def _load_dotenv_for_tests() -> None:
    """Load repo .env for local runs (PyCharm/CLI).

    This makes OPENAI_BASE_URL / OPENAI_MODEL available to tests without needing
    to manually export them in your shell.

    In CI, we *don't* auto-load `.env` by default, so integration tests that require
    a live LLM endpoint stay skipped unless explicitly opted-in.
    """

    # Opt-in locally with: CHEFS_CHALLENGE_LOAD_DOTENV_FOR_TESTS=1
    if os.environ.get("CI") and os.environ.get("CHEFS_CHALLENGE_LOAD_DOTENV_FOR_TESTS") != "1":
        return

    env_path = Path(__file__).resolve().parents[1] / ".env"
    if env_path.exists():
        from dotenv import load_dotenv

        load_dotenv(dotenv_path=env_path, override=False)

    # If using a local OpenAI-compatible endpoint, some clients require a key string.
    if os.environ.get("OPENAI_BASE_URL") and not os.environ.get("OPENAI_API_KEY"):
        os.environ["OPENAI_API_KEY"] = "ollama"


class FakeNarrator:
    """Records narrative requests; can be gated on an event or made to fail."""

    def __init__(self, *, fail: bool = False, gate: asyncio.Event | None = None) -> None:
        self.fail = fail
        self.gate = gate
        self.calls: list[tuple] = []

    async def request_failure_notice(self, *, level: int, score: int, reason: str) -> str:
        self.calls.append(("failure", level, score, reason))
        return await self._reply(f"Fired at level {level} for {reason}.")

    async def request_success_notice(self, *, level: int, bonus: int) -> str:
        self.calls.append(("success", level, bonus))
        return await self._reply(f"Level {level} done, ${bonus} bonus.")

    async def _reply(self, text: str) -> str:
        if self.gate is not None:
            await self.gate.wait()
        if self.fail:
            raise RuntimeError("narrative service unavailable")
        return text


# Long enough that no tick fires during a test unless the test asks for one.
IDLE_SETTINGS = GameSettings(tick_seconds=3600)


@pytest.fixture()
def narrator() -> FakeNarrator:
    return FakeNarrator()


@pytest.fixture()
async def controller(narrator: FakeNarrator) -> AsyncGenerator[SessionController, None]:
    c = SessionController(narrator=narrator, settings=IDLE_SETTINGS, rng=random.Random(1234))
    yield c
    c.close()


@pytest.fixture()
def client_and_controller():
    """FastAPI TestClient wired to a deterministic session with a fake narrator."""

    from fastapi.testclient import TestClient

    from chefs_challenge.api.deps import get_controller, reset_controller_for_tests
    from chefs_challenge.main import app

    c = SessionController(narrator=FakeNarrator(), settings=IDLE_SETTINGS, rng=random.Random(99))

    app.dependency_overrides[get_controller] = lambda: c
    with TestClient(app) as client:
        yield client, c
        client.portal.call(c.close)
    app.dependency_overrides.clear()
    reset_controller_for_tests()


async def wait_until(predicate, *, timeout: float = 2.0) -> None:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not reached before timeout")
        await asyncio.sleep(0.005)


def play_order(controller: SessionController) -> None:
    """Stack exactly the current order."""

    for kind in controller.snapshot().current_order:
        controller.append_ingredient(kind)
