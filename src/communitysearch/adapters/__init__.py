"""Upstream adapter layer — Connectors for knowledge-base search backends.

Built-in adapters:
  - devrev: DevRev ``search.core`` (articles with help center sync metadata)

Implement ``KnowledgeBaseAdapter`` to connect another backend.
"""
