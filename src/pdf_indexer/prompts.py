from __future__ import annotations


EXAMPLE_PROMPT = """You are given the embedding vector of a document stored in a vector index.
Describe, as far as possible, what information the provided context contains.
If the context is not enough to answer, say so plainly.
"""

DEFAULT_ASK = "What data from the provided context can you provide me?"
