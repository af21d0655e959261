"""Test the catalog store refresh policy"""

from unittest.mock import Mock

from lyric_sheet.catalog.assembler import build_catalog
from lyric_sheet.catalog.models import Catalog
from lyric_sheet.catalog.store import CatalogStore, sort_newest_first
from lyric_sheet.core.exceptions import FeedUnavailableError

SONGS = (
    "Title,Translated,Artist,Sub,Category,Album,Year\n"
    "Old,,A,,,,2001\n"
    "New,,B,,,,2023\n"
    "Unknown,,C,,,,someday\n"
    "AlsoNew,,D,,,,2023\n"
)


class TestCatalogStore:
    """Test CatalogStore.refresh()"""

    def test_starts_empty(self):
        store = CatalogStore(Mock())
        assert store.catalog == Catalog.empty()
        assert store.loaded is False
        assert store.last_refreshed is None

    def test_success_replaces_and_sorts(self):
        store = CatalogStore(lambda: build_catalog(SONGS))

        assert store.refresh() is True
        assert [s.title for s in store.songs] == ["New", "AlsoNew", "Old", "Unknown"]
        assert set(store.artist_meta) == {"A", "B", "C", "D"}
        assert store.loaded is True
        assert store.last_refreshed is not None

    def test_failure_retains_previous_catalog(self):
        error = FeedUnavailableError("Songs feed returned HTML", feed="songs")
        loader = Mock(side_effect=[build_catalog(SONGS), error])
        store = CatalogStore(loader)

        assert store.refresh() is True
        previous = store.catalog

        assert store.refresh() is False
        assert store.catalog is previous
        assert store.last_error is error

    def test_success_clears_last_error(self):
        error = FeedUnavailableError("Songs feed returned HTML", feed="songs")
        store = CatalogStore(Mock(side_effect=[error, build_catalog(SONGS)]))

        store.refresh()
        assert store.loaded is False
        store.refresh()
        assert store.last_error is None
        assert len(store.songs) == 4

    def test_stale_refresh_is_discarded(self):
        stale = build_catalog("Title,T,Artist\nStale,,X\n")
        fresh = build_catalog("Title,T,Artist\nFresh,,Y\n")
        store = None

        def loader():
            # The first refresh is overtaken by a second one that
            # finishes while the first is still loading.
            if loader.calls == 0:
                loader.calls += 1
                assert store.refresh() is True
                return stale
            loader.calls += 1
            return fresh

        loader.calls = 0
        store = CatalogStore(loader)

        assert store.refresh() is False
        assert [s.title for s in store.songs] == ["Fresh"]


def test_sort_newest_first_is_stable():
    songs = build_catalog(SONGS).songs
    ordered = sort_newest_first(songs)
    assert [s.release_year for s in ordered] == ["2023", "2023", "2001", "someday"]
    assert [s.title for s in ordered][:2] == ["New", "AlsoNew"]
