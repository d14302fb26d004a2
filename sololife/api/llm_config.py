"""LLM configuration and management."""

import logging
from typing import Literal, Optional

from langchain.chat_models import BaseChatModel
from langchain_ollama import ChatOllama
from langchain_openai import ChatOpenAI
from pydantic import BaseModel, Field

from sololife.config import (
    DEFAULT_LLM_MODEL,
    DEFAULT_LLM_NUM_CTX,
    DEFAULT_LLM_PROVIDER,
    DEFAULT_LLM_TEMPERATURE,
    DEFAULT_LLM_TIMEOUT,
    DEFAULT_OLLAMA_API_KEY,
    DEFAULT_OLLAMA_BASE_URL,
    DEFAULT_OPENAI_API_KEY,
    DEFAULT_OPENAI_BASE_URL,
)

logger = logging.getLogger(__name__)


class LLMConfig(BaseModel):
    """LLM configuration model."""

    provider: Literal["openai", "ollama"] = Field(
        default=DEFAULT_LLM_PROVIDER, description="LLM provider"
    )
    api_key: Optional[str] = Field(default=None, description="API key for OpenAI")
    base_url: Optional[str] = Field(
        default=None, description="Base URL (for Ollama or custom OpenAI endpoints)"
    )
    model: str = Field(default=DEFAULT_LLM_MODEL, description="Model name")
    temperature: float = Field(
        default=DEFAULT_LLM_TEMPERATURE, ge=0.0, le=2.0, description="Temperature"
    )
    max_tokens: Optional[int] = Field(default=None, description="Max tokens")
    timeout: int = Field(default=DEFAULT_LLM_TIMEOUT, ge=1, description="Timeout in seconds")


def create_llm(config: LLMConfig) -> BaseChatModel:
    """Create a chat model instance from an LLMConfig."""
    kwargs = {
        "model": config.model,
        "temperature": config.temperature,
        "timeout": config.timeout,
    }

    if config.max_tokens:
        kwargs["max_tokens"] = config.max_tokens

    match config.provider:
        case "ollama":
            kwargs["base_url"] = (config.base_url or DEFAULT_OLLAMA_BASE_URL).rstrip("/")
            kwargs["num_ctx"] = DEFAULT_LLM_NUM_CTX
            # ChatOllama takes client options instead of a timeout argument
            kwargs["client_kwargs"] = {"timeout": kwargs.pop("timeout")}
            if "max_tokens" in kwargs:
                kwargs["num_predict"] = kwargs.pop("max_tokens")
            return ChatOllama(**kwargs)
        case "openai":
            kwargs["base_url"] = config.base_url or DEFAULT_OPENAI_BASE_URL
            api_key = config.api_key or DEFAULT_OPENAI_API_KEY
            # Without a key, leave it to the client's own environment lookup
            if api_key:
                kwargs["api_key"] = api_key
            return ChatOpenAI(**kwargs)
        case _:
            raise ValueError(f"Invalid provider: {config.provider}")


class LLMConfigManager:
    """Manages LLM configuration and hot-reload."""

    def __init__(self, initial_config: Optional[LLMConfig] = None) -> None:
        """Initialize with optional config."""
        self._config = initial_config or LLMConfig()
        # Created on first use so the app can start without API keys
        self._llm_instance: Optional[BaseChatModel] = None

    @property
    def config(self) -> LLMConfig:
        """Get current config."""
        return self._config

    def update_config(self, new_config: LLMConfig) -> None:
        """Update configuration; the LLM instance is rebuilt on next use."""
        self._config = new_config
        self._llm_instance = None

    def get_llm(self) -> Optional[BaseChatModel]:
        """Get current LLM instance, or None if it could not be created."""
        if self._llm_instance is None:
            self._update_llm()
        return self._llm_instance

    def _update_llm(self) -> None:
        """Update LLM instance based on current config."""
        try:
            self._llm_instance = create_llm(self._config)
        except Exception as e:
            # Log error but don't fail - creation is retried on next use
            logger.warning(f"Failed to initialize LLM: {e}. LLM will be created when first used.")
            self._llm_instance = None
