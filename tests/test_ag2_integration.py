from __future__ import annotations

import os

import httpx
import pytest

from chefs_challenge.agents.narrator import AgentNarrator


def _endpoint_healthy(base_url: str) -> bool:
    # base_url might be http://127.0.0.1:11434/v1
    try:
        r = httpx.get(base_url.rstrip("/") + "/models", timeout=1.5)
        return r.status_code < 500
    except Exception:
        return False


@pytest.mark.asyncio
async def test_agent_narrator_live_env_gated() -> None:
    base_url = os.environ.get("OPENAI_BASE_URL")
    api_key = os.environ.get("OPENAI_API_KEY")

    if not (api_key or base_url):
        pytest.skip("Set OPENAI_API_KEY or OPENAI_BASE_URL")

    if base_url and not _endpoint_healthy(base_url):
        pytest.skip("LLM endpoint not reachable at OPENAI_BASE_URL")

    narrator = AgentNarrator()

    fired = await narrator.request_failure_notice(level=2, score=380, reason="wrong order")
    assert fired.strip()

    promoted = await narrator.request_success_notice(level=1, bonus=300)
    assert promoted.strip()
