"""Default configuration properties for chat-input."""
from __future__ import annotations

from typing import Any

DEFAULT_PROPERTIES: dict[str, Any] = {
    "url": {
        "openai": {
            "base": "https://api.openai.com",
            "chat_completion": "/v1/chat/completions",
        },
        "replicate": {
            "base": "https://api.replicate.com",
            "predictions": "/v1/predictions",
        },
        "sagemaker": {
            "base": None,
        },
    },
    "models": {
        "openai": {
            "chat": "gpt-3.5-turbo",
        },
        "replicate": {
            "llama": {
                "7b": "7b-chat",
                "13b": "13b-chat",
                "70b": "70b-chat",
                "7b-chat-version": "8e6975e5ed6174911a6ff3d60540dfd4844201974602551e10e9e87ab143d81e",
                "13b-chat-version": "f4e2de70d66816a838a89eeeb621910adffb0dd0baba3976c96980970978018d",
                "70b-chat-version": "02e509c789964a7ea8736978a43525956ef40397be9033abf9fd2badfe68c9e3",
            },
        },
    },
}
