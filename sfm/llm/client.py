"""Structured completions from LiteLLM models through Instructor."""

import logging
from typing import Any, TypeVar, cast

import instructor
from litellm import completion
from pydantic import BaseModel

from sfm.config import Config

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

# LiteLLM routes these providers by a "<provider>/<model>" name
PREFIXED_PROVIDERS = ("gemini", "anthropic", "bedrock", "vertex_ai")


class LLMError(Exception):
    """Raised when the language model call fails."""


def litellm_model_name(provider: str, model: str) -> str:
    """Model name in the form LiteLLM expects for the provider."""
    if provider in PREFIXED_PROVIDERS and not model.startswith(f"{provider}/"):
        return f"{provider}/{model}"
    return model


class LLMClient:
    """Language model client returning validated pydantic objects."""

    def __init__(
        self,
        provider: str | None = None,
        model: str | None = None,
        api_key: str | None = None,
        temperature: float | None = None,
        config: Config | None = None,
    ) -> None:
        """Create a client, filling unset values from the config.

        Args:
            provider: LiteLLM provider, e.g. gemini or openai
            model: Model name, e.g. gemini-2.5-flash
            api_key: Provider key; LiteLLM reads the provider's own env var when unset
            temperature: Sampling temperature
            config: Application config
        """
        config = config or Config()

        self.provider = provider or config.llm_provider
        self.model = model or config.llm_model
        self.temperature = config.llm_temperature if temperature is None else temperature
        self.api_key = api_key or (config.llm_api_key.get_secret_value() if config.llm_api_key else None)
        self.model_string = litellm_model_name(self.provider, self.model)
        self.client = instructor.from_litellm(completion)

        logger.info(f"LLM client ready: {self.model_string} (temperature={self.temperature})")

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    def complete(self, messages: list[dict[str, str]], response_model: type[ResponseT]) -> ResponseT:
        """Ask the model for a response shaped like response_model.

        Raises:
            LLMError: If the call fails or the answer does not validate
        """
        request: dict[str, Any] = {
            "model": self.model_string,
            "messages": cast(Any, messages),
            "temperature": self.temperature,
            "response_model": response_model,
        }
        if self.api_key:
            request["api_key"] = self.api_key

        logger.debug(f"Requesting {response_model.__name__} from {self.model_string}")
        try:
            response = self.client.chat.completions.create(**request)
        except Exception as e:
            logger.error(f"LLM completion error: {e}")
            raise LLMError(f"LLM completion failed: {e}") from e

        return response

    def __str__(self) -> str:
        return f"LLMClient(provider={self.provider}, model={self.model})"
