"""Catalog extraction script and command line interface."""

from charcoal_translation.script.catalog_script import (
    MERGE_STRATEGIES,
    STATUS_NEW,
    STATUS_OBSOLETE,
    STATUS_UPDATED,
    CatalogScript,
    ExtractedMessage,
)

__all__ = [
    "MERGE_STRATEGIES",
    "STATUS_NEW",
    "STATUS_OBSOLETE",
    "STATUS_UPDATED",
    "CatalogScript",
    "ExtractedMessage",
]
