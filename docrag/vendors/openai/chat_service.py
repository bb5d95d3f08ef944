"""SambaNova Chat/Completion Service (OpenAI-compatible)"""

# Python Packages
from typing import Optional
from loguru import logger

# Client
from .openai_client import OpenAIClient

# Rate limiting
from ..rate_throttler import RateThrottler, get_rate_throttler

# Constants
from ...base import constants





class ChatService:
    """Chat completions against SambaNova, paced by the shared throttler"""

    def __init__(self, throttler: Optional[RateThrottler] = None, client = None):
        self.client = client or OpenAIClient().get_client()
        self.throttler = throttler or get_rate_throttler()
        self.default_model = constants.SAMBANOVA_LLM_MODEL


    def generate(
        self,
        prompt: str,
        model: str = None,
        temperature: float = 0.1,
        max_tokens: int = 500
    ) -> str:
        """
        Single-turn generation for an already assembled prompt

        Args:
            prompt: Full prompt text, sent as one user turn
            model: Model to use (default: SAMBANOVA_LLM_MODEL)
            temperature: Sampling temperature
            max_tokens: Maximum tokens in response

        Returns:
            Generated response text
        """

        try:
            response = self.throttler.call(
                lambda: self.client.chat.completions.create(
                    model = model or self.default_model,
                    messages = [{"role": "user", "content": prompt}],
                    temperature = temperature,
                    max_tokens = max_tokens
                ),
                retries = constants.PROVIDER_MAX_RETRIES
            )
            return response.choices[0].message.content

        except Exception as error:
            logger.error(f"❌ Error generating response: {error}")
            raise
