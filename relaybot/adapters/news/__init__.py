"""News adapters: NewsAPI.org search."""

from relaybot.adapters.news.newsapi import (
    NEWS_EMPTY_REPLY,
    NEWS_ERROR_REPLY,
    NEWS_NOT_CONFIGURED_REPLY,
    NewsApiClient,
)

__all__ = [
    "NEWS_EMPTY_REPLY",
    "NEWS_ERROR_REPLY",
    "NEWS_NOT_CONFIGURED_REPLY",
    "NewsApiClient",
]
