"""Completion API module."""

from .completion_gateway import ChunkSink, CompletionGateway, ICompletionGateway

__all__ = ["ChunkSink", "CompletionGateway", "ICompletionGateway"]
