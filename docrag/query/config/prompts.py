"""
prompts.py: Prompt Templates
==============================
Every string the Context Assembler composes into a generation prompt.

Sections
--------
1. Document context  : header and per-document block
2. Question & format : question line, optional output-format block
3. Closing directives: with / without documents, with / without a format
"""


# ══════════════════════════════════════════════════════════════════════════════
# 1. Document context
# ══════════════════════════════════════════════════════════════════════════════

DOCUMENT_DATA_HEADER = "Document Data:"

DOCUMENT_BLOCK_TEMPLATE = "{name}:\n{excerpt}"

DOCUMENT_SEPARATOR = "\n\n"


# ══════════════════════════════════════════════════════════════════════════════
# 2. Question & format
# ══════════════════════════════════════════════════════════════════════════════

QUESTION_TEMPLATE = "Question: {query}"

OUTPUT_FORMAT_TEMPLATE = "Output Format: {directive}"


# ══════════════════════════════════════════════════════════════════════════════
# 3. Closing directives
# ══════════════════════════════════════════════════════════════════════════════

ANSWER_FROM_DATA = "Answer directly using the data above."

EXACT_FORMAT = " Use the exact format requested."

NO_FOLLOW_UPS = " Do not ask follow-up questions or provide explanations beyond answering the question."

KNOWLEDGE_ONLY_FORMAT_DIRECTIVE = "Provide a direct answer in the requested format."
