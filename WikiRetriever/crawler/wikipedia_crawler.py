"""
Wikipedia article crawler.

Fetches one article per topic, sequentially, with a fixed pause between
requests. A topic that fails to fetch or parse is logged and skipped; the rest
of the batch still comes back.
"""
import asyncio
import logging
import re
from typing import Any, Dict, List, Optional, Sequence

import httpx
from bs4 import BeautifulSoup

from WikiRetriever.config import load_config
from WikiRetriever.errors import DocumentFetchError
from WikiRetriever.preprocessing.document import Document

logger = logging.getLogger(__name__)

CITATION_RE = re.compile(r"\[\d+\]")
WHITESPACE_RE = re.compile(r"\s+")


class WikiArticle:
    """Title and paragraph text of one fetched article."""

    def __init__(self, title: str, content: str):
        self.title = title
        self.content = content

    def __repr__(self):
        return f"WikiArticle(title={self.title!r}, content={len(self.content)} chars)"


def article_url(base_url: str, topic: str) -> str:
    """URL of a topic's article; spaces in the topic become underscores."""
    return f"{base_url.rstrip('/')}/{WHITESPACE_RE.sub('_', topic.strip())}"


def parse_article(html: str) -> WikiArticle:
    """
    Extract the article title and body text from a Wikipedia page.

    Args:
        html: Raw page HTML

    Returns:
        WikiArticle with citation markers removed and whitespace collapsed
    """
    soup = BeautifulSoup(html, "html.parser")

    heading = soup.select_one("#firstHeading")
    title = heading.get_text().strip() if heading else ""

    content = " ".join(p.get_text() for p in soup.select("#mw-content-text p"))
    content = CITATION_RE.sub("", content)
    content = WHITESPACE_RE.sub(" ", content).strip()

    return WikiArticle(title=title, content=content)


async def fetch_wikipedia_article(client: httpx.AsyncClient, topic: str, base_url: str) -> WikiArticle:
    """
    Fetch and parse the article for one topic.

    Raises:
        DocumentFetchError: on any HTTP, network or parsing failure
    """
    url = article_url(base_url, topic)
    try:
        response = await client.get(url)
        response.raise_for_status()
        return parse_article(response.text)
    except httpx.HTTPError as e:
        raise DocumentFetchError(topic, str(e)) from e
    except Exception as e:
        raise DocumentFetchError(topic, f"could not parse page: {e}") from e


async def crawl_wikipedia(
    topics: Sequence[str],
    client: httpx.AsyncClient,
    base_url: str,
    request_delay: float = 1.0,
) -> List[WikiArticle]:
    """
    Fetch the articles for all topics, one at a time.

    Args:
        topics: Topic names, e.g. "Information_retrieval"
        client: HTTP client to use
        base_url: Wiki base URL, e.g. https://en.wikipedia.org/wiki
        request_delay: Seconds to wait after each topic

    Returns:
        Articles for the topics that could be fetched, in topic order
    """
    articles = []

    for topic in topics:
        logger.info("Fetching article for '%s'...", topic)
        try:
            article = await fetch_wikipedia_article(client, topic, base_url)
        except DocumentFetchError as e:
            logger.error("%s", e)
        else:
            articles.append(article)
            logger.info("Successfully fetched '%s'", article.title)

        await asyncio.sleep(request_delay)

    return articles


def convert_to_documents(articles: Sequence[WikiArticle]) -> List[Document]:
    """Number articles from 1 and prefix each body with its title."""
    return [
        Document(id=i + 1, title=article.title, content=f"{article.title}. {article.content}")
        for i, article in enumerate(articles)
    ]


def create_client(crawler_config: Dict[str, Any]) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=httpx.Timeout(crawler_config["timeout_seconds"]),
        headers={"User-Agent": crawler_config["user_agent"]},
        follow_redirects=True,
    )


async def get_wikipedia_data(
    topics: Sequence[str],
    config: Optional[Dict[str, Any]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> List[Document]:
    """
    Crawl Wikipedia for the given topics and return a corpus.

    Args:
        topics: Topic names
        config: Configuration dictionary (loaded from config.json if omitted)
        client: HTTP client to reuse; when omitted one is created and closed here

    Returns:
        Documents numbered from 1, or an empty list if the crawl fails as a whole
    """
    config = config or load_config()
    crawler_config = config["crawler"]

    try:
        if client is None:
            async with create_client(crawler_config) as own_client:
                articles = await crawl_wikipedia(
                    topics, own_client, crawler_config["base_url"], crawler_config["request_delay_seconds"],
                )
        else:
            articles = await crawl_wikipedia(
                topics, client, crawler_config["base_url"], crawler_config["request_delay_seconds"],
            )
    except Exception:
        logger.exception("Error in crawler")
        return []

    logger.info("Successfully crawled %d articles.", len(articles))
    return convert_to_documents(articles)
