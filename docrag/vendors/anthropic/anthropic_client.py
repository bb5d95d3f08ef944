"""
vendors/anthropic/anthropic_client.py
======================================
Singleton Anthropic client, used only when AI_PROVIDER=anthropic.
Built with max_retries = 0; retries go through RateThrottler.call.
"""

# Python Packages
from anthropic import Anthropic

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import ConfigurationException

# App Messages
from ...util import messages





class AnthropicClient:

    _instance = None
    _client   = None

    def __new__(cls):
        if cls._instance is None:
            if not constants.ANTHROPIC_API_KEY:
                raise ConfigurationException(
                    error_code = "ANTHROPIC_KEY_MISSING",
                    message = messages.ERROR["ANTHROPIC_KEY_MISSING"]
                )

            cls._instance = super(AnthropicClient, cls).__new__(cls)
            cls._client   = Anthropic(api_key = constants.ANTHROPIC_API_KEY, max_retries = 0)
        return cls._instance


    def get_client(self) -> Anthropic:
        return self._client
