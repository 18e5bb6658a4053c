"""Factory Method pattern - job search picks its index through a factory."""

from abc import ABC, abstractmethod


class SearchIndex(ABC):
    """Searchable job index."""

    @abstractmethod
    def search(self) -> str:
        """Run a search against the index."""


class PlainJobsSearchIndex(SearchIndex):
    def search(self) -> str:
        return "Searching in plain text job index"


class AggregatedJobsSearchIndex(SearchIndex):
    def search(self) -> str:
        return "Searching in aggregated job index"


class SearchIndexFactory(ABC):
    """Creator of search indexes."""

    @abstractmethod
    def create_search_index(self) -> SearchIndex:
        """Create the index this factory is responsible for."""


class PlainJobsSearchIndexFactory(SearchIndexFactory):
    def create_search_index(self) -> SearchIndex:
        return PlainJobsSearchIndex()


class AggregatedJobsSearchIndexFactory(SearchIndexFactory):
    def create_search_index(self) -> SearchIndex:
        return AggregatedJobsSearchIndex()


class JobSearch:
    """Client that only knows the factory interface, never a concrete index."""

    def __init__(self, factory: SearchIndexFactory) -> None:
        self._search_index = factory.create_search_index()

    @property
    def search_index(self) -> SearchIndex:
        return self._search_index

    def search(self) -> str:
        return self._search_index.search()
