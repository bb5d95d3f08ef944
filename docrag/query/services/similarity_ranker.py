"""
Service: SimilarityRanker
==========================
Scores documents against a query vector with cosine similarity and returns
the best matches above a threshold.

Exhaustive scan, no index: every corpus entry is scored.
"""

# Python Packages
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import numpy as np

# Store
from ...documents.services.document_store import DocumentRecord

# Config
from ..config import query_config





@dataclass(frozen = True)
class ScoredMatch:
    document: DocumentRecord
    similarity: float





def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity in [-1, 1].

    Returns 0.0 (never NaN) when either vector has zero magnitude.

    Raises:
        ValueError: Vectors of different length.
    """

    a = np.asarray(a, dtype = float)
    b = np.asarray(b, dtype = float)

    if a.shape != b.shape:
        raise ValueError(f"Vector length mismatch: {a.shape[0]} vs {b.shape[0]}")

    magnitude_a = np.linalg.norm(a)
    magnitude_b = np.linalg.norm(b)

    if magnitude_a == 0 or magnitude_b == 0:
        return 0.0

    return float(np.dot(a, b) / (magnitude_a * magnitude_b))





class SimilarityRanker:
    """ Stateless: safe to reuse across requests. """

    def rank(
        self,
        query_vector: Sequence[float],
        corpus: Sequence[Tuple[DocumentRecord, Optional[Sequence[float]]]],
        threshold: float = query_config.SIMILARITY_THRESHOLD,
        max_results: int = query_config.MAX_RANKED_RESULTS
    ) -> List[ScoredMatch]:
        """
        Args:
            query_vector: Embedding of the query.
            corpus:       (document, vector) pairs; entries without a vector are skipped.
            threshold:    Minimum similarity kept (inclusive).
            max_results:  Cap on returned matches.

        Returns:
            Matches by descending similarity; ties keep corpus order.
        """

        scored = [
            ScoredMatch(document = document, similarity = cosine_similarity(query_vector, vector))
            for document, vector in corpus
            if vector is not None
        ]

        relevant = [match for match in scored if match.similarity >= threshold]

        # sorted() is stable, so equal scores keep corpus order
        relevant = sorted(relevant, key = lambda match: match.similarity, reverse = True)

        return relevant[:max(max_results, 0)]



    def rank_documents(
        self,
        query_vector: Sequence[float],
        documents: Sequence[DocumentRecord],
        threshold: float = query_config.SIMILARITY_THRESHOLD,
        max_results: int = query_config.MAX_RANKED_RESULTS
    ) -> List[ScoredMatch]:
        """ rank() over documents' stored embeddings... """

        return self.rank(
            query_vector,
            [(document, document.embedding) for document in documents],
            threshold = threshold,
            max_results = max_results
        )
