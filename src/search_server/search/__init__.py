"""
Search indexing and query engine package.

This package provides the in-memory search stack:
- analyzers: Whitespace tokenizer and stop-word filter
- query: Plus/minus query parsing and validation
- inverted_index: Term -> document postings with TF weights
- document_store: Per-document rating, status and insertion order
- stats: TF-IDF helpers
- relevance: Relevance accumulation and ranking
- metrics: Rolling query metrics
"""
