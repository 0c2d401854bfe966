"""Tests for the raw-prompt Llama builders."""
from __future__ import annotations

import logging

import pytest

from chat_input.builders.llama import LlamaPromptBuilder, ReplicateDeployment, ReplicateLlamaBuilder
from chat_input.config.properties import PropertyStore
from chat_input.core.errors import ConfigurationMissError, InvalidSystemMessageError
from chat_input.core.models import Turn

# ---------------------------------------------------------------------------
# LlamaPromptBuilder
# ---------------------------------------------------------------------------

def test_defaults() -> None:
    b = LlamaPromptBuilder("S", model="llama-2")
    assert b.temperature == 0.5
    assert b.max_new_tokens == 500
    assert b.top_p == 1
    assert b.repetition_penalty == 1
    assert b.debug is False
    assert b.prompt == ""
    assert b.version == ""


def test_system_turn_is_stored_as_text() -> None:
    b = LlamaPromptBuilder(Turn.system("Be terse."), model="m")
    assert b.system_prompt == "Be terse."


def test_rejects_invalid_system_message() -> None:
    with pytest.raises(InvalidSystemMessageError):
        LlamaPromptBuilder(Turn.assistant("no"), model="m")


def test_missing_model_warns_but_builds(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="chat_input.builders.llama"):
        b = LlamaPromptBuilder("S")
    assert b.model == ""
    assert "No model name given" in caplog.text


def test_transcript_and_render_shape() -> None:
    b = LlamaPromptBuilder("S", model="m")
    b.append_user("U")
    b.append_assistant("A")
    assert b.prompt == "User: U\nAssistant: A"
    assert b.render() == {
        "model": "m",
        "inputData": {
            "input": {
                "prompt": "User: U\nAssistant: A",
                "system_prompt": "S",
                "max_new_tokens": 500,
                "temperature": 0.5,
                "top_p": 1,
                "repetition_penalty": 1,
                "debug": False,
            },
        },
    }


def test_first_line_can_be_assistant() -> None:
    b = LlamaPromptBuilder("S", model="m")
    b.append_assistant("Hi there")
    assert b.prompt == "Assistant: Hi there"


def test_options_are_rendered() -> None:
    b = LlamaPromptBuilder(
        "S", model="m", temperature=0.1, max_tokens=64, top_p=0.9,
        repetition_penalty=1.2, debug=True, prompt="User: earlier",
    )
    b.append_user("now")
    inp = b.render()["inputData"]["input"]
    assert inp["prompt"] == "User: earlier\nUser: now"
    assert (inp["temperature"], inp["max_new_tokens"], inp["top_p"]) == (0.1, 64, 0.9)
    assert inp["repetition_penalty"] == 1.2
    assert inp["debug"] is True


def test_reset_clears_prompt_only() -> None:
    b = LlamaPromptBuilder("S", model="m")
    b.append_user("U")
    b.reset()
    b.reset()
    assert b.prompt == ""
    assert b.system_prompt == "S"


def test_base_builder_never_renders_version() -> None:
    b = LlamaPromptBuilder("S", model="m", version="abc")
    assert "version" not in b.render()["inputData"]


# ---------------------------------------------------------------------------
# ReplicateLlamaBuilder
# ---------------------------------------------------------------------------

def test_replicate_model_defaults_from_config(properties: PropertyStore) -> None:
    b = ReplicateLlamaBuilder("S", config=properties)
    assert b.model == "13b-chat"


def test_replicate_size_selects_model(properties: PropertyStore) -> None:
    b = ReplicateLlamaBuilder("S", config=properties, size="70b")
    assert b.model == "70b-chat"


def test_replicate_render_includes_version(properties: PropertyStore) -> None:
    b = ReplicateLlamaBuilder("S", config=properties)
    b.append_user("U")
    payload = b.render()
    assert payload["model"] == "13b-chat"
    assert payload["inputData"]["version"] == "v13"
    assert payload["inputData"]["input"]["prompt"] == "User: U"
    assert list(payload["inputData"]) == ["version", "input"]


def test_replicate_version_resolved_lazily(properties: PropertyStore) -> None:
    b = ReplicateLlamaBuilder("S", config=properties)
    assert b.version == ""
    b.model = "70b-chat"
    assert b.render()["inputData"]["version"] == "v70"
    assert b.version == "v70"


def test_replicate_explicit_version_wins(properties: PropertyStore) -> None:
    b = ReplicateLlamaBuilder("S", config=properties, version="pinned")
    assert b.render()["inputData"]["version"] == "pinned"


def test_replicate_missing_version_tolerated(
    properties: PropertyStore, caplog: pytest.LogCaptureFixture
) -> None:
    b = ReplicateLlamaBuilder("S", config=properties, model="custom")
    with caplog.at_level(logging.WARNING, logger="chat_input.builders.llama"):
        payload = b.render()
    assert "version" not in payload["inputData"]
    assert b.version == ""
    assert "models.replicate.llama.custom-version" in caplog.text


def test_replicate_missing_version_retried_on_next_render() -> None:
    store = PropertyStore({"models": {"replicate": {"llama": {"13b": "13b-chat"}}}})
    b = ReplicateLlamaBuilder("S", config=store)
    assert "version" not in b.render()["inputData"]
    store.as_dict()["models"]["replicate"]["llama"]["13b-chat-version"] = "late"
    assert b.render()["inputData"]["version"] == "late"


def test_replicate_missing_version_strict(properties: PropertyStore) -> None:
    b = ReplicateLlamaBuilder("S", config=properties, model="custom", strict=True)
    with pytest.raises(ConfigurationMissError) as exc_info:
        b.render()
    assert exc_info.value.key == "models.replicate.llama.custom-version"


def test_replicate_missing_default_model_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="chat_input.builders.llama"):
        b = ReplicateLlamaBuilder("S", config=PropertyStore({}))
    assert b.model == ""
    assert "No model name given" in caplog.text


def test_deployment_resolve_version(properties: PropertyStore) -> None:
    deployment = ReplicateDeployment(properties)
    assert deployment.default_model() == "13b-chat"
    assert deployment.resolve_version("13b-chat") == "v13"
    assert deployment.resolve_version("missing") is None


def test_deployment_uses_bundled_defaults() -> None:
    deployment = ReplicateDeployment()
    assert deployment.default_model() == "13b-chat"
    assert deployment.resolve_version("13b-chat")
