from __future__ import annotations  # Explicit configuration values handed to clients and gateways

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .settings import Settings, settings as default_settings


class ApiConfig(BaseModel):  # Backend address, credential and identity for the dispatcher
    model_config = ConfigDict(frozen=True)

    base_url: str
    jwt: str
    username: str
    timeout_s: float = Field(default=10.0, gt=0)


class LlmRoute(BaseModel):  # LLM endpoint configuration
    model_config = ConfigDict(frozen=True)

    name: str
    base_url: str
    endpoint: str
    model: str
    timeout_s: float = Field(ge=0.1)
    response_format: str | None = None
    extra_headers: Dict[str, str] = Field(default_factory=dict)
    enforce_json: bool = True


class GenerationConfig(BaseModel):  # Live-generation switch and provider route
    model_config = ConfigDict(frozen=True)

    route: LlmRoute
    api_key: Optional[str] = None

    @property
    def live(self) -> bool:  # Live generation only with a non-empty key
        return bool(self.api_key and self.api_key.strip())


def api_config(cfg: Optional[Settings] = None, *, base_url: Optional[str] = None) -> ApiConfig:  # Build dispatcher config from settings
    cfg = cfg if cfg is not None else default_settings
    return ApiConfig(
        base_url=(base_url if base_url is not None else cfg.API_BASE).rstrip("/"),
        jwt=cfg.JWT,
        username=cfg.USERNAME,
        timeout_s=cfg.HTTP_TIMEOUT_S,
    )


def generation_config(cfg: Optional[Settings] = None) -> GenerationConfig:  # Build summarization provider config from settings
    cfg = cfg if cfg is not None else default_settings
    route = LlmRoute(
        name="summarization",
        base_url=cfg.GENAI_BASE_URL.rstrip("/"),
        endpoint=cfg.GENAI_ENDPOINT,
        model=cfg.GENAI_MODEL,
        timeout_s=cfg.GENAI_TIMEOUT_S,
        response_format="json_object",
    )
    return GenerationConfig(route=route, api_key=cfg.GENAI_API_KEY)
