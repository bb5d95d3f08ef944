"""
Service: DocumentSelector
==========================
Resolves the caller's selection criteria into the working set of documents.

Filters are applied in a fixed order (ids → names → tags) and each one
NARROWS the running subset (intersection by document id). A filter that
matches nothing still counts as applied, so the result can be empty.

Only when useAllDocuments is true, or no filter was supplied at all, does
the selector fall back to every document. An empty filter list counts as
supplied: {"tags": []} selects nothing rather than everything.
"""

# Python Packages
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

# Store
from ...documents.services.document_store import DocumentRecord

# Config
from ..config import query_config





@dataclass(frozen = True)
class SelectionCriteria:
    ids: Tuple[str, ...] = ()
    name_substrings: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    use_all: bool = False
    # A filter key was present, even as an empty list
    filters_supplied: bool = False

    @classmethod
    def from_request(cls, payload: Dict) -> "SelectionCriteria":
        """ Build from the query JSON (documentIds / documentNames / tags / useAllDocuments)... """

        return cls(
            ids = tuple(payload.get("documentIds") or ()),
            name_substrings = tuple(payload.get("documentNames") or ()),
            tags = tuple(payload.get("tags") or ()),
            use_all = bool(payload.get("useAllDocuments", False)),
            filters_supplied = any(
                payload.get(key) is not None for key in ("documentIds", "documentNames", "tags")
            )
        )

    def has_any(self) -> bool:
        return self.filters_supplied or bool(self.ids or self.name_substrings or self.tags)



@dataclass(frozen = True)
class SelectionResult:
    documents: Tuple[DocumentRecord, ...] = ()
    descriptions: Tuple[str, ...] = field(default = ())

    @property
    def count(self) -> int:
        return len(self.documents)





class DocumentSelector:

    def select(self, criteria: SelectionCriteria, all_documents: Sequence[DocumentRecord]) -> SelectionResult:
        """
        Args:
            criteria:      Filters from the request.
            all_documents: Full collection, in store order.

        Returns:
            SelectionResult with the subset (store order) and one description
            per applied filter.
        """

        subset: Optional[List[DocumentRecord]] = None
        descriptions: List[str] = []

        if criteria.ids:
            wanted = set(criteria.ids)
            subset = [document for document in all_documents if document.id in wanted]
            descriptions.append(query_config.DESCRIPTION_IDS.format(values = ", ".join(criteria.ids)))

        if criteria.name_substrings:
            by_name = [
                document for document in all_documents
                if self._matches_name(document, criteria.name_substrings)
            ]
            subset = self._narrow(subset, by_name)
            descriptions.append(query_config.DESCRIPTION_NAMES.format(values = ", ".join(criteria.name_substrings)))

        if criteria.tags:
            wanted_tags = set(criteria.tags)
            by_tag = [document for document in all_documents if wanted_tags.intersection(document.tags)]
            subset = self._narrow(subset, by_tag)
            descriptions.append(query_config.DESCRIPTION_TAGS.format(values = ", ".join(criteria.tags)))

        if criteria.use_all or (subset is None and not criteria.has_any()):
            subset = list(all_documents)
            descriptions.append(query_config.DESCRIPTION_ALL)

        return SelectionResult(documents = tuple(subset or ()), descriptions = tuple(descriptions))



    # ── Private ────────────────────────────────────────────────────────────────
    @staticmethod
    def _matches_name(document: DocumentRecord, substrings: Sequence[str]) -> bool:
        name = (document.name or "").lower()
        source = (document.source or "").lower()

        for substring in substrings:
            needle = substring.lower()
            if needle in name or needle in source:
                return True

        return False


    @staticmethod
    def _narrow(subset: Optional[List[DocumentRecord]], matches: List[DocumentRecord]) -> List[DocumentRecord]:
        if subset is None:
            return matches

        matched_ids = {document.id for document in matches}
        return [document for document in subset if document.id in matched_ids]
