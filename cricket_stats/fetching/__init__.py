from cricket_stats.fetching.base import BaseStatsFetcher
from cricket_stats.fetching.factory import FetcherFactory
from cricket_stats.fetching.fetcher import StatsFetcher

__all__ = ["BaseStatsFetcher", "FetcherFactory", "StatsFetcher"]
