from typing import Dict, List, Optional

from openai import OpenAI

from errors import ModelInvocationError

MAX_TOKENS = 400
TEMPERATURE = 0.0


class ChatModel:
    """Thin wrapper over the OpenAI chat completions call used by /ask."""

    def __init__(self, client, model: str, temperature: float = TEMPERATURE, max_tokens: int = MAX_TOKENS):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    @classmethod
    def from_settings(cls, settings):
        if not settings.openai_api_key:
            raise ModelInvocationError("OPENAI_API_KEY not set")
        client = OpenAI(api_key=settings.openai_api_key, timeout=settings.openai_timeout)
        return cls(client, settings.openai_model)

    def complete(self, messages: List[Dict[str, str]]) -> Optional[str]:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            raise ModelInvocationError(f"OpenAI call failed: {e}") from e

        if not response.choices:
            return None
        message = response.choices[0].message
        return getattr(message, "content", None) if message is not None else None
