"""
Catalog ingestion for lyric-sheet.

This module turns the two published sheet feeds into a Catalog:
    - models: Song, ArtistMeta, Catalog
    - mapper: Row -> Song / ArtistMeta, dropped-row collection
    - fetcher: HTTP client for the feeds
    - assembler: Orchestration (fetch, parse, map, reconcile)
    - store: Owned catalog value with replace-on-success refresh

Usage:
    from lyric_sheet.catalog import fetch_catalog

    catalog = fetch_catalog()
"""

from lyric_sheet.catalog.assembler import (
    assemble_catalog,
    build_catalog,
    fetch_catalog,
    merge_fallback_artists,
)
from lyric_sheet.catalog.fetcher import SheetClient, is_html_document
from lyric_sheet.catalog.mapper import (
    DroppedRow,
    DroppedRowCollector,
    map_artist_row,
    map_song_row,
    parse_categories,
)
from lyric_sheet.catalog.models import ArtistMeta, Catalog, Song
from lyric_sheet.catalog.store import CatalogStore

__all__ = [
    # Models
    "Song",
    "ArtistMeta",
    "Catalog",
    # Mapper
    "map_song_row",
    "map_artist_row",
    "parse_categories",
    "DroppedRow",
    "DroppedRowCollector",
    # Fetcher
    "SheetClient",
    "is_html_document",
    # Assembler
    "build_catalog",
    "assemble_catalog",
    "fetch_catalog",
    "merge_fallback_artists",
    # Store
    "CatalogStore",
]
