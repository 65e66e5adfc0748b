from __future__ import annotations

import pytest

from chefs_challenge.personas import PersonaName, make_base_narrator_context, make_persona_context
from chefs_challenge.prompts import PromptLoadError, load_prompt, render_prompt


def test_load_prompt_reads_file() -> None:
    text = load_prompt("narrator_base.txt")
    assert "burger" in text.lower()


def test_load_prompt_missing_raises() -> None:
    with pytest.raises(PromptLoadError):
        load_prompt("does_not_exist.txt")


def test_render_prompt_fills_placeholders() -> None:
    text = render_prompt("fired_notice.txt", level=3, score=450, reason="time expired")
    assert "level 3" in text
    assert "$450" in text
    assert "time expired" in text
    assert "{" not in text


@pytest.mark.parametrize("persona", list(PersonaName))
def test_persona_prompts_load(persona: PersonaName) -> None:
    ctx = make_persona_context(persona)
    assert ctx.persona_name == persona.value
    assert ctx.prompt.strip()


def test_base_context_prepends_prefix() -> None:
    ctx = make_base_narrator_context(system_prefix="PREFIX")
    assert ctx.system_prompt.startswith("PREFIX")
