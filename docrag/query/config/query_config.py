"""
query_config.py: Retrieval & Selection Settings
=================================================
Numbers that shape which documents reach the prompt and how the answer
is scored. Tune here; no service file hardcodes these.
"""

# ── Similarity Ranking ─────────────────────────────────────────────────────────
# Used only when a request sets rankBySimilarity.
SIMILARITY_THRESHOLD = 0.3   # cosine similarity below this is dropped
MAX_RANKED_RESULTS   = 3     # at most this many documents go into the context

# ── Context Assembly ───────────────────────────────────────────────────────────
# Characters of each document's content placed in the prompt (from the start).
CONTEXT_EXCERPT_CHARS = 1000

# ── Confidence ─────────────────────────────────────────────────────────────────
DIRECT_SELECTION_CONFIDENCE = 0.8   # context came from explicit selection
DEGRADED_CONFIDENCE         = 0.0   # provider failure or nothing relevant

# ── Selection Descriptions ─────────────────────────────────────────────────────
DESCRIPTION_IDS   = "Document IDs: {values}"
DESCRIPTION_NAMES = "Document Names: {values}"
DESCRIPTION_TAGS  = "Tags: {values}"
DESCRIPTION_ALL   = "All available documents"

# ── API Hints ──────────────────────────────────────────────────────────────────
# Returned by GET /documents so callers know how to select documents.
SELECTION_USAGE = {
    "byId":   'Use "documentIds" array with specific document IDs',
    "byName": 'Use "documentNames" array with document names (partial match)',
    "byTags": 'Use "tags" array to filter by document tags',
    "all":    'Use "useAllDocuments": true to include all documents',
    "ranked": 'Add "rankBySimilarity": true to keep only the most relevant selected documents'
}
