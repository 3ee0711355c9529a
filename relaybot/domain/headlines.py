"""Headline formatting for news search results."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

DEFAULT_TOPIC = "latest"
MAX_HEADLINES = 3


@dataclass
class NewsArticle:
    title: str
    url: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "NewsArticle":
        return cls(title=str(data.get("title") or ""), url=str(data.get("url") or ""))


def topic_or_default(topic: str) -> str:
    """Blank or whitespace-only topics become the default query term."""
    return topic.strip() or DEFAULT_TOPIC


def top_articles(raw_articles: Iterable[Dict[str, Any]], limit: int = MAX_HEADLINES) -> List[NewsArticle]:
    """Materialize only the first `limit` articles, in received order."""
    articles = []
    if limit <= 0:
        return articles
    for data in raw_articles:
        articles.append(NewsArticle.from_api(data))
        if len(articles) >= limit:
            break
    return articles


def format_headlines(topic: str, articles: List[NewsArticle]) -> str:
    """Render a numbered headline list under a header naming the topic."""
    entries = "\n\n".join(
        f"{i}. {article.title}\n{article.url}" for i, article in enumerate(articles, start=1)
    )
    return f'📰 Top results for "{topic_or_default(topic)}":\n\n{entries}'
