""" DocRAG: document question answering over a rate-limited LLM... """
