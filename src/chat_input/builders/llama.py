"""Builders for raw-prompt Llama chat models."""
from __future__ import annotations

import logging
from typing import Any

from chat_input.builders.history import coerce_system_turn
from chat_input.config.loader import default_properties
from chat_input.config.properties import PropertyLookup
from chat_input.core.errors import ConfigurationMissError
from chat_input.core.models import Turn

_log = logging.getLogger(__name__)

DEFAULT_SIZE = "13b"


class LlamaPromptBuilder:
    """Conversation kept as a flat ``User:``/``Assistant:`` transcript.

    The system instruction travels separately as ``system_prompt``.  Prefer
    :class:`ReplicateLlamaBuilder` or :class:`SageMakerLlamaBuilder`, which
    know their provider's model defaults.

    Implements :class:`ConversationBuilder`.

    Args:
        system_message: System-role :class:`Turn` or plain instruction text.
        model: Model identifier.  A warning is logged when it is missing.
        version: Deployment version, rendered only by hosted variants.
        temperature: Sampling temperature (default ``0.5``).
        max_tokens: Sent as ``max_new_tokens`` (default ``500``).
        top_p: Nucleus sampling threshold (default ``1``).
        repetition_penalty: Penalty for repeated tokens (default ``1``).
        debug: Ask the provider for debug output.
        prompt: Transcript to start from.
        deployment: Strategy that fills in model and version defaults.

    Raises:
        InvalidSystemMessageError: If ``system_message`` is not a system turn
            or a string.
    """

    def __init__(
        self,
        system_message: Turn | str,
        model: str | None = None,
        version: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        top_p: float | None = None,
        repetition_penalty: float | None = None,
        debug: bool = False,
        prompt: str = "",
        deployment: ReplicateDeployment | None = None,
    ) -> None:
        self.system_prompt = coerce_system_turn(system_message).content
        self._deployment = deployment

        if not model and deployment is not None:
            model = deployment.default_model()
        if not model:
            _log.warning(
                "No model name given; pass one or use ReplicateLlamaBuilder / SageMakerLlamaBuilder"
            )

        self.model = model or ""
        self.version = version or ""
        self.temperature = 0.5 if temperature is None else temperature
        self.max_new_tokens = 500 if max_tokens is None else max_tokens
        self.top_p = 1 if top_p is None else top_p
        self.repetition_penalty = 1 if repetition_penalty is None else repetition_penalty
        self.debug = debug
        self.prompt = prompt

    def _append_line(self, speaker: str, text: str) -> None:
        line = f"{speaker}: {text}"
        self.prompt = f"{self.prompt}\n{line}" if self.prompt else line

    # -- ConversationBuilder interface ----------------------------------------

    def append_user(self, text: str) -> None:
        self._append_line("User", text)

    def append_assistant(self, text: str) -> None:
        self._append_line("Assistant", text)

    def reset(self) -> None:
        self.prompt = ""

    def render(self) -> dict[str, Any]:
        input_data: dict[str, Any] = {}
        if self._deployment is not None:
            if not self.version:
                self.version = self._deployment.resolve_version(self.model) or ""
            if self.version:
                input_data["version"] = self.version

        input_data["input"] = {
            "prompt": self.prompt,
            "system_prompt": self.system_prompt,
            "max_new_tokens": self.max_new_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "repetition_penalty": self.repetition_penalty,
            "debug": self.debug,
        }
        return {"model": self.model, "inputData": input_data}


class ReplicateDeployment:
    """Model and version defaults for Llama models hosted on Replicate.

    Both values come from the configuration lookup: the model from
    ``models.replicate.llama.<size>``, the version from
    ``models.replicate.llama.<model>-version``.

    Args:
        config: Property source.  Defaults to the process-wide store.
        size: Size key used when no model is given (``"7b"``, ``"13b"``,
            ``"70b"``).
        strict: Raise :class:`ConfigurationMissError` instead of tolerating a
            missing version.
    """

    def __init__(
        self,
        config: PropertyLookup | None = None,
        size: str = DEFAULT_SIZE,
        strict: bool = False,
    ) -> None:
        self._config = config if config is not None else default_properties()
        self.size = size
        self.strict = strict

    def default_model(self) -> str | None:
        return self._config.get_property(f"models.replicate.llama.{self.size}")

    def resolve_version(self, model: str) -> str | None:
        """Look up the deployment version pinned for ``model``.

        Returns:
            The version string, or ``None`` when the key is absent and
            :attr:`strict` is off.

        Raises:
            ConfigurationMissError: If the key is absent and :attr:`strict`
                is on.
        """
        key = f"models.replicate.llama.{model}-version"
        version = self._config.get_property(key)
        if not version:
            if self.strict:
                raise ConfigurationMissError(key)
            _log.warning("No deployment version configured for model %r (%s)", model, key)
            return None
        return version


class ReplicateLlamaBuilder(LlamaPromptBuilder):
    """:class:`LlamaPromptBuilder` for Replicate-hosted deployments.

    The model defaults from configuration at construction.  The version is
    resolved at each :meth:`render` while unset, using the model current at
    that point, and is sent as ``inputData.version``.
    """

    def __init__(
        self,
        system_message: Turn | str,
        config: PropertyLookup | None = None,
        size: str = DEFAULT_SIZE,
        strict: bool = False,
        **options: Any,
    ) -> None:
        deployment = ReplicateDeployment(config, size=size, strict=strict)
        super().__init__(system_message, deployment=deployment, **options)
