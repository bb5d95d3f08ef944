"""
vendors/factory.py: AI Provider Factory
==========================================
Single place that decides which provider answers generation calls.

    AI_PROVIDER=sambanova    ← default, OpenAI-compatible SambaNova endpoint
    AI_PROVIDER=anthropic    ← Claude

Embeddings always come from SambaNova (E5-Mistral): stored vectors must
all come from one model, otherwise cosine scores between them are meaningless.

Both services share the process-wide RateThrottler.
"""

# Python Packages
from loguru import logger

# Constants
from ..base import constants

# Exceptions
from ..util.exceptions import ConfigurationException

# App Messages
from ..util import messages





SUPPORTED_PROVIDERS = ("sambanova", "anthropic")


def validate_provider_settings() -> str:
    """
    Check AI_PROVIDER and its credentials. create_app() calls this first, so
    a bad setting stops the process instead of degrading every query.

    Returns:
        The normalised provider name.

    Raises:
        ConfigurationException: Unknown provider, or anthropic without a key.
    """

    provider = constants.AI_PROVIDER.lower().strip()

    if provider not in SUPPORTED_PROVIDERS:
        raise ConfigurationException(
            error_code = "UNSUPPORTED_AI_PROVIDER",
            message = messages.ERROR["UNSUPPORTED_AI_PROVIDER"].format(provider = provider)
        )

    if provider == "anthropic" and not constants.ANTHROPIC_API_KEY:
        raise ConfigurationException(
            error_code = "ANTHROPIC_KEY_MISSING",
            message = messages.ERROR["ANTHROPIC_KEY_MISSING"]
        )

    return provider


def get_chat_service():
    """
    Return the ChatService for AI_PROVIDER.

    Returns:
        An object with generate(prompt, temperature, max_tokens).
    """

    provider = validate_provider_settings()

    if provider == "sambanova":
        from .openai.chat_service import ChatService
        logger.debug(f"🤖 LLM Provider: SambaNova ({constants.SAMBANOVA_LLM_MODEL})")
        return ChatService()

    from .anthropic.chat_service import ChatService
    logger.debug(f"🤖 LLM Provider: Anthropic ({constants.ANTHROPIC_DEFAULT_MODEL})")
    return ChatService()


def get_embedding_service():
    """
    Always the SambaNova EmbeddingService.
    """

    from .openai.embedding_service import EmbeddingService
    return EmbeddingService()


def current_models() -> dict:
    """ Model names in use, for /stats and /health... """

    provider = constants.AI_PROVIDER.lower().strip()
    llm = constants.ANTHROPIC_DEFAULT_MODEL if provider == "anthropic" else constants.SAMBANOVA_LLM_MODEL

    return {
        "provider": provider,
        "llm": llm,
        "embedding": constants.SAMBANOVA_EMBEDDING_MODEL
    }
