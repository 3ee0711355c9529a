"""NewsAPI.org client using aiohttp. Implements NewsPort."""

import sys

import aiohttp

from relaybot.config import AppConfig
from relaybot.domain.headlines import format_headlines, top_articles, topic_or_default

NEWS_NOT_CONFIGURED_REPLY = "⚠️ NEWS_API not configured."
NEWS_EMPTY_REPLY = "No news found for that topic."
NEWS_ERROR_REPLY = "⚠️ Error fetching news."
NEWS_TIMEOUT_SECONDS = 20
NEWS_PAGE_SIZE = 5


def _log(msg: str):
    print(msg, file=sys.stderr)


class NewsApiClient:
    """Keyword search over NewsAPI's `everything` endpoint, newest first."""

    def __init__(self, config: AppConfig):
        self._api_key = config.news_api_key
        self.url = config.news_api_url

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def headlines(self, topic: str) -> str:
        """Top three headlines for `topic` (or "latest"), as display text."""
        if not self.is_configured:
            return NEWS_NOT_CONFIGURED_REPLY

        params = {
            "q": topic_or_default(topic),
            "pageSize": str(NEWS_PAGE_SIZE),
            "sortBy": "publishedAt",
            "apiKey": self._api_key,
        }
        timeout = aiohttp.ClientTimeout(total=NEWS_TIMEOUT_SECONDS)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self.url, params=params) as resp:
                    resp.raise_for_status()
                    data = await resp.json()

            raw_articles = (data.get("articles") if isinstance(data, dict) else None) or []
            if not raw_articles:
                return NEWS_EMPTY_REPLY
            return format_headlines(topic, top_articles(raw_articles))
        except Exception as e:
            _log(f"[newsapi] search failed for {params['q']!r}: {e!r}")
            return NEWS_ERROR_REPLY
