"""Base adapter interface — Abstract class for knowledge-base connectors."""

from communitysearch.adapters.base.adapter import KnowledgeBaseAdapter

__all__ = ["KnowledgeBaseAdapter"]
