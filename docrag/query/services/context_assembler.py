"""
Service: ContextAssembler
==========================
Builds the single prompt sent to the generation provider from the selected
documents, the question and an optional output-format directive.

Pure string composition: identical inputs always give identical output.
No summarization, no de-duplication; each document contributes its name and
the first CONTEXT_EXCERPT_CHARS characters of its content.
"""

# Python Packages
from typing import Optional, Sequence

# Store
from ...documents.services.document_store import DocumentRecord

# Config
from ..config import prompts, query_config





class ContextAssembler:

    def __init__(self, excerpt_chars: int = query_config.CONTEXT_EXCERPT_CHARS):
        self.excerpt_chars = excerpt_chars


    def excerpt(self, document: DocumentRecord) -> str:
        return (document.content or "")[:self.excerpt_chars]


    def assemble(
        self,
        documents: Sequence[DocumentRecord],
        query: str,
        output_format_directive: Optional[str] = None
    ) -> str:
        """
        Returns:
            With documents:    document data, question, optional format, closing directive.
            Without documents: the bare query, or question + format when a directive is given.
        """

        directive = output_format_directive or None

        if not documents:
            return self._knowledge_only(query, directive)

        blocks = [
            prompts.DOCUMENT_BLOCK_TEMPLATE.format(name = document.name, excerpt = self.excerpt(document))
            for document in documents
        ]

        sections = [
            prompts.DOCUMENT_DATA_HEADER + "\n" + prompts.DOCUMENT_SEPARATOR.join(blocks),
            prompts.QUESTION_TEMPLATE.format(query = query)
        ]

        if directive:
            sections.append(prompts.OUTPUT_FORMAT_TEMPLATE.format(directive = directive))

        closing = prompts.ANSWER_FROM_DATA
        if directive:
            closing += prompts.EXACT_FORMAT
        closing += prompts.NO_FOLLOW_UPS

        sections.append(closing)

        return "\n\n".join(sections)



    def _knowledge_only(self, query: str, directive: Optional[str]) -> str:
        if not directive:
            return query

        return "\n\n".join([
            prompts.QUESTION_TEMPLATE.format(query = query),
            prompts.OUTPUT_FORMAT_TEMPLATE.format(directive = directive),
            prompts.KNOWLEDGE_ONLY_FORMAT_DIRECTIVE
        ])
