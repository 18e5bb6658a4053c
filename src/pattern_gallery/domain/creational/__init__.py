"""Creational patterns: Singleton, Prototype, Factory Method."""

from .factory_method import (
    AggregatedJobsSearchIndex,
    AggregatedJobsSearchIndexFactory,
    JobSearch,
    PlainJobsSearchIndex,
    PlainJobsSearchIndexFactory,
    SearchIndex,
    SearchIndexFactory,
)
from .prototype import JobPost, JobPostStatus
from .singleton import SharedService, get_shared_service

__all__ = [
    "AggregatedJobsSearchIndex",
    "AggregatedJobsSearchIndexFactory",
    "JobPost",
    "JobPostStatus",
    "JobSearch",
    "PlainJobsSearchIndex",
    "PlainJobsSearchIndexFactory",
    "SearchIndex",
    "SearchIndexFactory",
    "SharedService",
    "get_shared_service",
]
