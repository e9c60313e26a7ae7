import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from WikiRetriever.config import load_config
from WikiRetriever.crawler.wikipedia_crawler import get_wikipedia_data
from WikiRetriever.errors import ConfigError
from WikiRetriever.logging_setup import configure_logging
from WikiRetriever.preprocessing.document import Document, load_documents
from WikiRetriever.search_interface import SearchResult
from WikiRetriever.search_system import InformationRetrievalSystem

logger = logging.getLogger(__name__)


def display_results(system: InformationRetrievalSystem, results: List[SearchResult], engine_type: str):
    """Print search results with titles and a content snippet"""
    if not results:
        print(f"\nNo results found for {engine_type} search.")
        return

    print(f"\n{engine_type.upper()} SEARCH RESULTS:")
    print("=" * 60)

    for i, result in enumerate(results):
        doc = system.get_document(result.document_id)
        title = doc.title if doc and doc.title else f"Document {result.document_id}"
        print(f"{i+1}. [{result.document_id}] {title}")
        if engine_type.lower() != 'boolean':
            print(f"   Similarity: {result.score:.4f}")

        snippet = doc.content[:150].replace('\n', ' ') if doc else ""
        if snippet:
            print(f"   Content: {snippet}...")
        print()


def load_corpus(args, config) -> Optional[List[Document]]:
    """Load the corpus from a JSON file, or crawl Wikipedia for the configured topics."""
    if args.documents:
        try:
            documents = load_documents(args.documents)
        except (OSError, ValueError) as e:
            logger.error("Error loading documents: %s", e)
            return None
        logger.info("Loaded %d documents from %s", len(documents), args.documents)
        return documents

    topics = args.topics or config["topics"]
    logger.info("Starting to crawl Wikipedia...")
    documents = asyncio.run(get_wikipedia_data(topics, config=config))
    logger.info("Loaded %d documents from Wikipedia", len(documents))
    return documents


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='WikiRetriever - Boolean and TF-IDF search over Wikipedia articles'
    )
    parser.add_argument('--documents', help='Path to documents JSON file (skips crawling)')
    parser.add_argument('--topics', nargs='+', help='Wikipedia topics to crawl (default: from config)')
    parser.add_argument('--config', help='Path to a config JSON file')
    parser.add_argument('--boolean-query', action='append', help='Boolean query (repeatable)')
    parser.add_argument('--tfidf-query', action='append', help='Free text query for TF-IDF search (repeatable)')
    parser.add_argument('--top', type=int, help='Number of top ranked results to display')
    parser.add_argument('--dump-index', action='store_true', help='Print the inverted index')
    parser.add_argument('--dump-matrix', action='store_true', help='Print the occurrence matrix')
    parser.add_argument('--log-level', help='Logging level (default: from config)')
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(args.log_level or config["logging"]["level"])

    documents = load_corpus(args, config)
    if documents is None:
        return 1

    system = InformationRetrievalSystem(documents)
    top_k = args.top if args.top is not None else config["search"]["top_k"]

    # Without explicit queries, run the demo queries
    boolean_queries = args.boolean_query
    tfidf_queries = args.tfidf_query
    if not boolean_queries and not tfidf_queries:
        boolean_queries = config["demo_queries"]["boolean"]
        tfidf_queries = config["demo_queries"]["ranked"]

    for query in boolean_queries or []:
        print(f'\nSearch for "{query}":')
        display_results(system, system.boolean_search(query), "Boolean")

    for query in tfidf_queries or []:
        print(f'\nTF-IDF Search for "{query}":')
        display_results(system, system.ranked_search(query, top_k=top_k), "TF-IDF")

    if args.dump_matrix:
        print("\nPrinting Occurrence Matrix:")
        system.print_occurrence_matrix()

    if args.dump_index:
        print("\nPrinting Inverted Index:")
        system.print_inverted_index()

    return 0


if __name__ == "__main__":
    sys.exit(main())
