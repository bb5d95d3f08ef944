"""
query/config/__init__.py
========================
Config files:
  query_config: ranking threshold, result cap, excerpt size, confidence values
  llm_config  : generation temperature & max_tokens
  prompts     : every string the Context Assembler composes
"""

from . import query_config
from . import llm_config
from . import prompts
