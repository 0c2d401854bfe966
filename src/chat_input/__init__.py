"""Provider-specific request payloads from one conversation state."""
from chat_input.builders import (
    ChatCompletionBuilder,
    ConversationBuilder,
    LlamaPromptBuilder,
    ReplicateLlamaBuilder,
    SageMakerLlamaBuilder,
    base_url,
    create_builder,
)
from chat_input.config import PropertyLookup, PropertyStore, load_properties
from chat_input.core import (
    ConfigurationMissError,
    InvalidSystemMessageError,
    ProviderKind,
    Role,
    Turn,
)

__all__ = [
    "Turn", "Role", "ProviderKind",
    "InvalidSystemMessageError", "ConfigurationMissError",
    "ConversationBuilder", "ChatCompletionBuilder", "LlamaPromptBuilder",
    "ReplicateLlamaBuilder", "SageMakerLlamaBuilder",
    "create_builder", "base_url",
    "PropertyLookup", "PropertyStore", "load_properties",
]
