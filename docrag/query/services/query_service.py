"""
Query Service
Orchestrates one query: select → (rank) → assemble → generate → package.

States run strictly in order:
    SelectingDocuments → RankingBySimilarity (optional) → AssemblingContext
    → AwaitingGeneration → Completed

Outcomes:
    answered                  provider answered from the assembled prompt
    no_relevant_information   nothing selected / nothing above threshold;
                              no generation call is made
    degraded                  embedding or generation failed; the caller
                              still gets a 200 with an apology and 0 confidence
"""

# Python Packages
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional
from loguru import logger

# Services
from .document_selector import DocumentSelector, SelectionCriteria, SelectionResult
from .similarity_ranker import SimilarityRanker, ScoredMatch
from .context_assembler import ContextAssembler
from .generation_outcome import Degraded, GenerationOutcome, Success
from ...documents.services.document_cache import DocumentCache, document_cache as shared_document_cache

# Vendors
from ...vendors import ChatService, EmbeddingService

# Config
from ..config import llm_config, query_config

# Constants
from ...base import constants

# App Messages
from ...util import messages


OUTCOME_ANSWERED    = "answered"
OUTCOME_NO_RELEVANT = "no_relevant_information"
OUTCOME_DEGRADED    = "degraded"





@dataclass(frozen = True)
class QueryRequest:
    prompt: str
    criteria: SelectionCriteria = SelectionCriteria()
    output_format_directive: Optional[str] = None
    rank_by_similarity: bool = False

    @classmethod
    def from_payload(cls, payload: Dict) -> "QueryRequest":
        """ Build from an already validated /query body... """

        return cls(
            prompt = payload["prompt"].strip(),
            criteria = SelectionCriteria.from_request(payload),
            output_format_directive = payload.get("outputFormatDirective") or None,
            rank_by_similarity = bool(payload.get("rankBySimilarity", False))
        )





class QueryService:
    """
    Main orchestrator for the query pipeline.
    Collaborators are injectable; defaults are the process-wide instances.
    """

    def __init__(
        self,
        document_cache: Optional[DocumentCache] = None,
        embedding_service = None,
        chat_service = None,
        selector: Optional[DocumentSelector] = None,
        ranker: Optional[SimilarityRanker] = None,
        assembler: Optional[ContextAssembler] = None,
        clock: Callable[[], float] = time.perf_counter,
        allow_knowledge_only: bool = constants.ALLOW_KNOWLEDGE_ONLY_ANSWERS
    ):
        self.document_cache = document_cache or shared_document_cache
        self._embedding_service = embedding_service
        self._chat_service = chat_service
        self.selector = selector or DocumentSelector()
        self.ranker = ranker or SimilarityRanker()
        self.assembler = assembler or ContextAssembler()
        self._clock = clock
        self.allow_knowledge_only = allow_knowledge_only


    # Providers are created on first use so the no-relevant path never builds a client
    @property
    def embedding_service(self):
        if self._embedding_service is None:
            self._embedding_service = EmbeddingService()
        return self._embedding_service


    @property
    def chat_service(self):
        if self._chat_service is None:
            self._chat_service = ChatService()
        return self._chat_service



    def answer(self, request: QueryRequest) -> Dict:
        """
        Answer one query against the selected documents.

        Args:
            request: Validated QueryRequest

        Returns:
            dict: responseText, outcome, confidence, processingTimeMs,
                  selectionDescriptions, selectedCount, selectedPreview, ranked, matches
        """

        started = self._clock()

        logger.info(f"🔍 Query: \"{request.prompt}\"")

        # ── Step 1: Select documents ───────────────────────────────────────
        selection = self.selector.select(request.criteria, self.document_cache.all())

        logger.info(f"   Selection criteria: {' | '.join(selection.descriptions) or 'none'}")
        logger.info(f"   Selected documents: {selection.count}")

        if not selection.documents and not self.allow_knowledge_only:
            return self._no_relevant_information(request, selection, started)

        context_documents = selection.documents
        confidence = query_config.DIRECT_SELECTION_CONFIDENCE
        matches: List[ScoredMatch] = []

        # ── Step 2: Rank by similarity (optional) ──────────────────────────
        if request.rank_by_similarity and selection.documents:
            try:
                query_vector = self.embedding_service.generate_embedding(request.prompt)
                matches = self.ranker.rank_documents(query_vector, selection.documents)

            except Exception as error:
                logger.warning(f"⚠️  Ranking failed, returning degraded response: {error}")
                return self._package(request, selection, Degraded.from_error(error), started, ranked = True)

            if not matches:
                logger.info("   No documents above similarity threshold")
                return self._no_relevant_information(request, selection, started, ranked = True)

            context_documents = tuple(match.document for match in matches)
            confidence = self._mean_similarity(matches)

        # ── Step 3: Assemble context ───────────────────────────────────────
        prompt = self.assembler.assemble(
            context_documents,
            request.prompt,
            request.output_format_directive
        )

        # ── Step 4: Generate ───────────────────────────────────────────────
        outcome = self._generate(prompt)

        # ── Step 5: Package ────────────────────────────────────────────────
        return self._package(
            request,
            selection,
            outcome,
            started,
            confidence = confidence,
            ranked = request.rank_by_similarity and bool(selection.documents),
            matches = matches
        )



    # ── Private ────────────────────────────────────────────────────────────────
    def _generate(self, prompt: str) -> GenerationOutcome:
        try:
            text = self.chat_service.generate(
                prompt,
                temperature = llm_config.LLM_ANSWER_TEMPERATURE,
                max_tokens = llm_config.LLM_ANSWER_MAX_TOKENS
            )
            return Success(text = text or "")

        except Exception as error:
            logger.warning(f"⚠️  Generation failed, returning degraded response: {error}")
            return Degraded.from_error(error)



    def _no_relevant_information(
        self,
        request: QueryRequest,
        selection: SelectionResult,
        started: float,
        ranked: bool = False
    ) -> Dict:
        response = self._package(
            request,
            selection,
            Success(text = messages.ERROR["NO_RELEVANT_INFORMATION"]),
            started,
            confidence = query_config.DEGRADED_CONFIDENCE,
            ranked = ranked
        )
        response["outcome"] = OUTCOME_NO_RELEVANT
        return response



    def _package(
        self,
        request: QueryRequest,
        selection: SelectionResult,
        outcome: GenerationOutcome,
        started: float,
        confidence: float = query_config.DIRECT_SELECTION_CONFIDENCE,
        ranked: bool = False,
        matches: Optional[List[ScoredMatch]] = None
    ) -> Dict:
        if outcome.degraded:
            confidence = query_config.DEGRADED_CONFIDENCE

        processing_time_ms = int(round((self._clock() - started) * 1000))

        logger.info(f"✅ Query finished in {processing_time_ms}ms (confidence {confidence})")

        return {
            "prompt": request.prompt,
            "outputFormatDirective": request.output_format_directive,
            "responseText": outcome.text,
            "outcome": OUTCOME_DEGRADED if outcome.degraded else OUTCOME_ANSWERED,
            "confidence": confidence,
            "processingTimeMs": processing_time_ms,
            "selectionDescriptions": list(selection.descriptions),
            "selectedCount": selection.count,
            "selectedPreview": [
                {
                    "id": document.id,
                    "name": document.name,
                    "contentLength": len(self.assembler.excerpt(document))
                }
                for document in selection.documents
            ],
            "ranked": ranked,
            "matches": [
                {
                    "id": match.document.id,
                    "name": match.document.name,
                    "similarity": round(match.similarity, 4)
                }
                for match in (matches or [])
            ]
        }


    @staticmethod
    def _mean_similarity(matches: List[ScoredMatch]) -> float:
        mean = sum(match.similarity for match in matches) / len(matches)
        return round(min(max(mean, 0.0), 1.0), 3)
