"""Configuration package for the interview admin core."""
from .routes import ApiConfig, GenerationConfig, LlmRoute, api_config, generation_config
from .settings import Settings, settings

__all__ = [
    "ApiConfig",
    "GenerationConfig",
    "LlmRoute",
    "api_config",
    "generation_config",
    "Settings",
    "settings",
]
