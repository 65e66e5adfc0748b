from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chefs_challenge.core.context import BaseAgentContext, PersonaContext
from chefs_challenge.prompts import load_prompt


class PersonaName(str, Enum):
    furious_owner = "furious_owner"
    proud_owner = "proud_owner"


@dataclass(frozen=True, slots=True)
class PersonaSpec:
    name: PersonaName
    prompt_file: str
    # Sampling temperature for this voice.
    temperature: float


PERSONA_SPECS: dict[PersonaName, PersonaSpec] = {
    PersonaName.furious_owner: PersonaSpec(PersonaName.furious_owner, "furious_owner.txt", 0.9),
    PersonaName.proud_owner: PersonaSpec(PersonaName.proud_owner, "proud_owner.txt", 0.8),
}


def load_persona_prompt(persona: PersonaName | str) -> str:
    persona_name = PersonaName(persona) if not isinstance(persona, PersonaName) else persona
    spec = PERSONA_SPECS[persona_name]
    return load_prompt(spec.prompt_file)


def make_persona_context(persona: PersonaName | str) -> PersonaContext:
    persona_name = PersonaName(persona) if not isinstance(persona, PersonaName) else persona
    return PersonaContext(persona_name=persona_name.value, prompt=load_persona_prompt(persona_name))


def make_base_narrator_context(*, system_prefix: str = "") -> BaseAgentContext:
    """Construct the shared context for every narrator persona.

    The shared context is the restaurant setting from prompts/narrator_base.txt.
    You can optionally prepend extra system-level instructions via system_prefix.
    """

    base_rules = load_prompt("narrator_base.txt")
    parts: list[str] = []
    if system_prefix.strip():
        parts.append(system_prefix.strip())
    parts.append(base_rules.strip())

    return BaseAgentContext(system_prompt="\n\n".join(parts).strip())
