""" Embedding Service (SambaNova, OpenAI-compatible)... """

# Python Packages
from typing import List, Optional
from loguru import logger

# Client
from .openai_client import OpenAIClient

# Rate limiting
from ..rate_throttler import RateThrottler, get_rate_throttler

# Constants
from ...base import constants





class EmbeddingService:
    """ Generates embedding vectors; every request passes the shared throttler... """

    def __init__(self, throttler: Optional[RateThrottler] = None, client = None):
        self.client = client or OpenAIClient().get_client()
        self.throttler = throttler or get_rate_throttler()
        self.default_model = constants.SAMBANOVA_EMBEDDING_MODEL



    def embed(self, texts: List[str], model: str = None) -> List[List[float]]:
        """
        Embed several texts in one provider call

        Args:
            texts: Texts to embed
            model: Embedding model (default: SAMBANOVA_EMBEDDING_MODEL)

        Returns:
            One vector per text, same order
        """

        if not texts:
            return []

        try:
            response = self.throttler.call(
                lambda: self.client.embeddings.create(
                    model = model or self.default_model,
                    input = list(texts)
                ),
                retries = constants.PROVIDER_MAX_RETRIES
            )
            return [item.embedding for item in response.data]

        except Exception as error:
            logger.error(f"❌ Error generating embeddings: {error}")
            raise



    def generate_embedding(self, text: str, model: str = None) -> List[float]:
        return self.embed([text], model = model)[0]
