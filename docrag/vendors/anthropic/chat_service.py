"""
vendors/anthropic/chat_service.py
===================================
ChatService backed by Anthropic Claude.

Same generate() as vendors/openai/chat_service.py, paced by the same
process-wide throttler, so the query pipeline does not care which provider
is configured.
"""

# Python Packages
from typing import Optional
from loguru import logger

# Client
from .anthropic_client import AnthropicClient

# Rate limiting
from ..rate_throttler import RateThrottler, get_rate_throttler

# Constants
from ...base import constants





class ChatService:

    def __init__(self, throttler: Optional[RateThrottler] = None, client = None):
        self.client        = client or AnthropicClient().get_client()
        self.throttler     = throttler or get_rate_throttler()
        self.default_model = constants.ANTHROPIC_DEFAULT_MODEL


    def generate(
        self,
        prompt: str,
        model: str = None,
        temperature: float = 0.1,
        max_tokens: int = 500
    ) -> str:
        """
        Generate a response with the Anthropic Messages API.

        Args:
            prompt:      Full prompt text, sent as one user turn.
            model:       Claude model string. Defaults to ANTHROPIC_DEFAULT_MODEL.
            temperature: Sampling temperature.
            max_tokens:  Maximum tokens in response.

        Returns:
            Generated response text.
        """

        try:
            response = self.throttler.call(
                lambda: self.client.messages.create(
                    model       = model or self.default_model,
                    max_tokens  = max_tokens,
                    temperature = temperature,
                    messages    = [{"role": "user", "content": prompt}]
                ),
                retries = constants.PROVIDER_MAX_RETRIES
            )
            return response.content[0].text

        except Exception as error:
            logger.error(f"❌ Anthropic error generating response: {error}")
            raise
