from __future__ import annotations


class IndexerError(Exception):
    """
    Base class for every error raised by the indexer.
    """


class ConfigurationError(IndexerError, RuntimeError):
    """
    Required configuration is missing or invalid. Fatal at startup.
    """


class ClientNotAuthorizedError(IndexerError, RuntimeError):
    """
    A service client was used before authorize(). Never retried.
    """


class SourceUnavailableError(IndexerError):
    """
    The documents directory cannot be read.
    """


class ExtractionError(IndexerError):
    """
    A document produced no usable text.
    """


class EmbeddingError(IndexerError):
    """
    The embedding service failed or returned nothing.
    """


class StoreError(IndexerError):
    """
    The vector index rejected an upsert or query.
    """
