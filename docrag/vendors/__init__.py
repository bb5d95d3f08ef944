"""
vendors/__init__.py
====================
Public surface of the vendors package.

    from ..vendors import ChatService        ← provider picked by AI_PROVIDER
    from ..vendors import EmbeddingService   ← always SambaNova

These are factory functions; calling them returns the configured instance.
"""

from .factory import get_chat_service, get_embedding_service

ChatService      = get_chat_service
EmbeddingService = get_embedding_service
