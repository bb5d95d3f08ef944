"""
SambaNova speaks the OpenAI wire protocol, so the official openai SDK is
used with base_url pointed at SambaNova.

SDK retries are off: a retry inside the SDK would bypass the rate throttler.
The services retry through RateThrottler.call instead.
"""

# Python Packages
import threading
from openai import OpenAI

# Constants
from ...base import constants





class OpenAIClient:
    """ Process-wide SDK client; built on first use... """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._client = OpenAI(
                        api_key = constants.SAMBANOVA_API_KEY,
                        base_url = constants.SAMBANOVA_BASE_URL,
                        max_retries = 0
                    )
                    cls._instance = instance

        return cls._instance


    def get_client(self) -> OpenAI:
        return self._client
