from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class BaseAgentContext:
    """Global, shared instructions for every narrator persona."""

    system_prompt: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class PersonaContext:
    """Persona overlay: who is speaking and in what mood."""

    persona_name: str
    prompt: str


@dataclass(frozen=True, slots=True)
class RenderedContext:
    """Final, merged context passed into the LLM agent."""

    system_prompt: str

    def as_messages(self) -> list[dict[str, str]]:
        return [{"role": "system", "content": self.system_prompt}]


def compose_context(*, base: BaseAgentContext, persona: PersonaContext) -> RenderedContext:
    parts: list[str] = []
    parts.append(base.system_prompt.strip())

    parts.append(
        "\n".join(
            [
                "PERSONA CONTEXT:",
                f"- persona: {persona.persona_name}",
                "- persona_prompt:",
                persona.prompt.strip(),
            ]
        ).strip()
    )

    system_prompt = "\n\n".join([p for p in parts if p.strip()]).strip()
    return RenderedContext(system_prompt=system_prompt)
