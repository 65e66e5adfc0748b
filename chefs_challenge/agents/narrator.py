from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, cast

from chefs_challenge.agents.base import Agent
from chefs_challenge.agents.factory import create_default_agent
from chefs_challenge.agents.json_schema import JsonSchema
from chefs_challenge.core.context import RenderedContext, compose_context
from chefs_challenge.personas import PERSONA_SPECS, PersonaName, make_base_narrator_context, make_persona_context
from chefs_challenge.prompts import render_prompt

FAILURE_FALLBACK = "YOU ARE FIRED! GET OUT OF MY KITCHEN! (AI Connection Lost)"


def success_fallback(bonus: int) -> str:
    return f"Great job! Here is your bonus of ${bonus}. Get ready for the next rush!"


class NarrativeError(RuntimeError):
    pass


class Narrator(Protocol):
    async def request_failure_notice(self, *, level: int, score: int, reason: str) -> str:  # pragma: no cover
        ...

    async def request_success_notice(self, *, level: int, bonus: int) -> str:  # pragma: no cover
        ...


NARRATIVE_RESPONSE_SCHEMA = JsonSchema(
    name="narrative_response",
    schema={
        "type": "object",
        "properties": {
            "message": {
                "type": "string",
                "description": "The owner's message to the cook, plain text.",
                "minLength": 1,
                "maxLength": 600,
            }
        },
        "required": ["message"],
        "additionalProperties": False,
    },
    strict=True,
)


async def propose_narrative_with_agent(*, agent: Agent, ctx: RenderedContext, prompt: str) -> str:
    """Ask an agent for a narrative message and return the text.

    Uses structured outputs when possible; falls back to best-effort parsing.
    Raises NarrativeError if the agent produced nothing usable.
    """

    propose = getattr(agent, "propose_action")
    try:
        action = await propose(prompt=prompt, ctx=ctx, structured_output=NARRATIVE_RESPONSE_SCHEMA)
    except TypeError:
        action = await propose(prompt=prompt, ctx=ctx)

    # Preferred: strict JSON string.
    try:
        parsed = json.loads(action.content)
    except (json.JSONDecodeError, TypeError):
        parsed = None
    if isinstance(parsed, dict):
        message = parsed.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()

    # Fallback: treat raw content as the message.
    text = action.content.strip() if isinstance(action.content, str) else ""
    if not text:
        raise NarrativeError("Agent returned an empty message")
    return text


AgentFactory = Callable[..., Agent]


@dataclass(slots=True)
class AgentNarrator:
    """Narrator backed by an LLM agent (AG2 by default).

    Each request builds a fresh agent with the persona's temperature and makes a
    single attempt; callers own fallback handling.
    """

    agent_factory: AgentFactory = create_default_agent

    async def _narrate(self, *, persona: PersonaName, prompt: str) -> str:
        spec = PERSONA_SPECS[persona]
        ctx = compose_context(base=make_base_narrator_context(), persona=make_persona_context(persona))
        agent = self.agent_factory(name=f"narrator-{persona.value}", temperature=spec.temperature)
        return await propose_narrative_with_agent(agent=cast(Any, agent), ctx=ctx, prompt=prompt)

    async def request_failure_notice(self, *, level: int, score: int, reason: str) -> str:
        prompt = render_prompt("fired_notice.txt", level=level, score=score, reason=reason)
        return await self._narrate(persona=PersonaName.furious_owner, prompt=prompt)

    async def request_success_notice(self, *, level: int, bonus: int) -> str:
        prompt = render_prompt("promotion_notice.txt", level=level, bonus=bonus)
        return await self._narrate(persona=PersonaName.proud_owner, prompt=prompt)
