"""Conversation builder factory registry."""
from __future__ import annotations

from typing import Any

from chat_input.builders.protocol import ConversationBuilder
from chat_input.config.loader import default_properties
from chat_input.config.properties import PropertyLookup
from chat_input.core.models import ProviderKind, Turn


def _as_kind(kind: ProviderKind | str) -> ProviderKind:
    try:
        return ProviderKind(kind)
    except ValueError:
        supported = ", ".join(repr(k.value) for k in ProviderKind)
        raise ValueError(
            f"Unknown provider kind: {kind!r}. Supported kinds: {supported}."
        ) from None


def create_builder(
    kind: ProviderKind | str,
    system_message: Turn | str,
    config: PropertyLookup | None = None,
    **options: Any,
) -> ConversationBuilder:
    """Instantiate the conversation builder for a provider family.

    Args:
        kind: Provider family, as a :class:`ProviderKind` or its value.
        system_message: System-role turn or instruction text.
        config: Property source for providers that resolve defaults from
            configuration (``openai`` and ``replicate``).  Defaults to the
            process-wide store.  The ``llama`` and ``sagemaker`` builders take
            no configuration and ignore it.
        **options: Builder-specific options (``model``, ``temperature``,
            ``parameters`` ...).

    Returns:
        An object satisfying the :class:`ConversationBuilder` protocol.

    Raises:
        ValueError: If ``kind`` is not a recognised provider kind.
    """
    kind = _as_kind(kind)

    if kind is ProviderKind.OPENAI:
        from chat_input.builders.chat_completion import ChatCompletionBuilder

        if config is None:
            config = default_properties()
        if "model" not in options:
            options["model"] = config.get_property("models.openai.chat")
        return ChatCompletionBuilder(system_message, **options)

    if kind is ProviderKind.LLAMA:
        from chat_input.builders.llama import LlamaPromptBuilder

        return LlamaPromptBuilder(system_message, **options)

    if kind is ProviderKind.REPLICATE:
        from chat_input.builders.llama import ReplicateLlamaBuilder

        return ReplicateLlamaBuilder(system_message, config=config, **options)

    from chat_input.builders.sagemaker import SageMakerLlamaBuilder

    return SageMakerLlamaBuilder(system_message, **options)


def base_url(kind: ProviderKind | str, config: PropertyLookup | None = None) -> str | None:
    """Return the configured API base URL for a provider family.

    The raw-prompt ``llama`` kind has no endpoint of its own and yields
    ``None``, as does any provider whose ``url.<kind>.base`` is unset.
    """
    kind = _as_kind(kind)
    if kind is ProviderKind.LLAMA:
        return None
    if config is None:
        config = default_properties()
    return config.get_property(f"url.{kind.value}.base")
