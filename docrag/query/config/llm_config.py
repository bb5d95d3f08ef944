"""
llm_config.py: Generation Settings
====================================
The query pipeline makes one generation call per request. Keep it
deterministic: answers must come from the document data, not invention.
"""

LLM_ANSWER_TEMPERATURE = 0.1
LLM_ANSWER_MAX_TOKENS  = 500
