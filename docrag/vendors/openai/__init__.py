""" SambaNova (OpenAI-compatible) Vendor Package... """

# Services
from .openai_client import OpenAIClient
from .embedding_service import EmbeddingService
from .chat_service import ChatService

__all__ = ['OpenAIClient', 'EmbeddingService', 'ChatService']
