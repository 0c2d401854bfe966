from chat_input.builders.chat_completion import ChatCompletionBuilder
from chat_input.builders.history import TurnHistory
from chat_input.builders.llama import LlamaPromptBuilder, ReplicateDeployment, ReplicateLlamaBuilder
from chat_input.builders.protocol import ConversationBuilder
from chat_input.builders.registry import base_url, create_builder
from chat_input.builders.sagemaker import SageMakerLlamaBuilder

__all__ = [
    "ConversationBuilder", "TurnHistory", "ChatCompletionBuilder",
    "LlamaPromptBuilder", "ReplicateDeployment", "ReplicateLlamaBuilder",
    "SageMakerLlamaBuilder", "create_builder", "base_url",
]
