from chat_input.core.errors import ConfigurationMissError, InvalidSystemMessageError
from chat_input.core.models import ProviderKind, Role, Turn

__all__ = [
    "Role", "ProviderKind", "Turn",
    "InvalidSystemMessageError", "ConfigurationMissError",
]
