#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
WikiRetriever - Interactive CLI Interface
A rich command-line front end for boolean and TF-IDF search over Wikipedia articles
"""

import argparse
import asyncio
import os
import sys
import time
import traceback
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.syntax import Syntax
from rich.table import Table

from WikiRetriever.config import load_config
from WikiRetriever.crawler.wikipedia_crawler import get_wikipedia_data
from WikiRetriever.errors import ConfigError
from WikiRetriever.logging_setup import configure_logging
from WikiRetriever.preprocessing.document import Document, load_documents
from WikiRetriever.search_interface import SearchResult
from WikiRetriever.search_system import InformationRetrievalSystem

# Initialize rich console
console = Console()


class WikiRetrieverCLI:
    def __init__(self, config):
        """Initialize the CLI interface"""
        self.config = config
        self.system: Optional[InformationRetrievalSystem] = None

    @property
    def documents_loaded(self) -> bool:
        return self.system is not None

    def print_header(self):
        """Display the application header"""
        console.print(Panel(
            "[bold blue]WikiRetriever[/bold blue] [yellow]Search Engine[/yellow]",
            border_style="blue",
            subtitle="Boolean and TF-IDF retrieval",
            width=80
        ))

    def _progress(self) -> Progress:
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TimeElapsedColumn(),
            console=console
        )

    def build_system(self, documents: List[Document]) -> bool:
        """Index a corpus, replacing the current one"""
        with self._progress() as progress:
            task = progress.add_task("Building index...", total=None)
            self.system = InformationRetrievalSystem(documents)
            progress.update(task, completed=True)

        index = self.system.index
        console.print(
            f"[green]Indexed [bold]{index.document_count}[/bold] documents, "
            f"[bold]{len(index.inverted_index)}[/bold] terms[/green]"
        )
        return True

    def load_documents(self, documents_path: str) -> bool:
        """Load documents from a JSON file and index them"""
        console.print(f"Loading documents from: [cyan]{escape(documents_path)}[/cyan]")
        try:
            documents = load_documents(documents_path)
        except (OSError, ValueError) as e:
            console.print(f"[bold red]Error loading documents:[/bold red] {escape(str(e))}")
            return False
        return self.build_system(documents)

    def crawl_topics(self, topics: List[str]) -> bool:
        """Fetch Wikipedia articles for the topics and index them"""
        console.print(f"Crawling Wikipedia for [cyan]{len(topics)}[/cyan] topics...")
        with self._progress() as progress:
            task = progress.add_task("Fetching articles...", total=None)
            documents = asyncio.run(get_wikipedia_data(topics, config=self.config))
            progress.update(task, completed=True)

        if not documents:
            console.print("[bold red]No articles could be fetched.[/bold red]")
            return False
        console.print(f"[green]Fetched [bold]{len(documents)}[/bold] articles[/green]")
        return self.build_system(documents)

    def search_boolean(self, query: str) -> List[SearchResult]:
        """Perform a Boolean search"""
        console.print(f"Executing Boolean search: '[cyan]{escape(query)}[/cyan]'")
        start_time = time.time()
        results = self.system.boolean_search(query)
        execution_time = time.time() - start_time
        console.print(f"[green]Found {len(results)} documents in {execution_time:.6f} seconds[/green]")
        return results

    def search_tfidf(self, query: str, top_k: int) -> List[SearchResult]:
        """Perform a TF-IDF search"""
        console.print(f"Executing TF-IDF search: '[cyan]{escape(query)}[/cyan]'")
        start_time = time.time()
        results = self.system.ranked_search(query, top_k=top_k)
        execution_time = time.time() - start_time
        console.print(f"[green]Found {len(results)} documents in {execution_time:.6f} seconds[/green]")
        return results

    def display_results(self, results: List[SearchResult], engine_type: str):
        """Display search results in a formatted way"""
        if not results:
            console.print(f"[yellow]No results found for {engine_type} search.[/yellow]")
            return

        ranked = engine_type.lower() != 'boolean'
        title = (f"[bold]Found {len(results)} document(s) ranked by relevance[/bold]" if ranked
                 else f"[bold]Found {len(results)} document(s)[/bold]")
        table = Table(
            box=box.HEAVY_EDGE,
            show_header=True,
            header_style="bold magenta",
            title=title,
            title_style="yellow"
        )
        table.add_column("#", style="dim", width=4)
        table.add_column("ID", style="dim", width=6)
        table.add_column("Title", style="cyan bold")
        if ranked:
            table.add_column("Score", style="yellow", width=10)
        table.add_column("Content", style="green", no_wrap=False)

        for i, result in enumerate(results):
            doc = self.system.get_document(result.document_id)
            content_snippet = doc.content[:150].replace('\n', ' ') if doc else ""
            if len(content_snippet) == 150:
                content_snippet += "..."
            doc_title = escape(doc.title) if doc and doc.title else "[dim]<No title>[/dim]"

            row = [str(i + 1), str(result.document_id), doc_title]
            if ranked:
                # Colour by score band
                score_str = f"{result.score:.4f}"
                if result.score > 0.7:
                    row.append(f"[bold green]{score_str}[/bold green]")
                elif result.score > 0.4:
                    row.append(f"[yellow]{score_str}[/yellow]")
                else:
                    row.append(f"[dim]{score_str}[/dim]")
            row.append(escape(content_snippet))

            table.add_row(*row, style="on blue" if i == 0 else "")

        console.print(table)

    def show_inverted_index(self):
        console.print(Panel(self.system.dump_inverted_index(), title="[bold]Inverted Index[/bold]",
                            border_style="cyan", expand=False))

    def show_occurrence_matrix(self):
        console.print(Panel(self.system.dump_occurrence_matrix(), title="[bold]Occurrence Matrix[/bold]",
                            border_style="cyan", expand=False))

    def ask_for_corpus(self) -> bool:
        """Ask the user where the corpus comes from"""
        console.print("[bold yellow]First, let's load some documents.[/bold yellow]")
        table = Table(show_header=False, box=box.SIMPLE)
        table.add_column("Option", style="dim")
        table.add_column("Description", style="yellow")
        table.add_row("1", "Crawl Wikipedia (configured topics)")
        table.add_row("2", "Crawl Wikipedia (enter topics)")
        table.add_row("3", "Load a JSON documents file")
        console.print(table)

        choice = console.input("[bold cyan]Enter choice (1-3): [/bold cyan]")
        if choice == '1':
            return self.crawl_topics(self.config["topics"])
        if choice == '2':
            topics = console.input("[bold cyan]Topics (comma separated): [/bold cyan]")
            topics = [topic.strip() for topic in topics.split(",") if topic.strip()]
            if not topics:
                console.print("[bold red]No topics given.[/bold red]")
                return False
            return self.crawl_topics(topics)
        if choice == '3':
            path = console.input("[bold cyan]Enter path to documents JSON file: [/bold cyan]")
            if not path or not os.path.exists(path):
                console.print("[bold red]File not found.[/bold red]")
                return False
            return self.load_documents(path)

        console.print("[bold red]Invalid choice.[/bold red]")
        return False

    def interactive_mode(self):
        """Run the application in interactive mode"""
        while True:
            console.rule("[bold blue]WikiRetriever[/bold blue]")

            if not self.documents_loaded:
                if not self.ask_for_corpus():
                    again = console.input("[bold cyan]Try again? (y/n): [/bold cyan]")
                    if again.lower() != 'y':
                        return
                    continue

            menu_table = Table(show_header=False, box=box.SIMPLE)
            menu_table.add_column("Option", style="dim")
            menu_table.add_column("Description", style="yellow")

            menu_table.add_row("1", "Boolean Search")
            menu_table.add_row("2", "TF-IDF Search")
            menu_table.add_row("3", "Both Search Methods")
            menu_table.add_row("4", "Show Inverted Index")
            menu_table.add_row("5", "Show Occurrence Matrix")
            menu_table.add_row("6", "Load Another Corpus")
            menu_table.add_row("7", "Quit")

            console.print("\n[bold cyan]Available Actions:[/bold cyan]")
            console.print(menu_table)

            choice = console.input("\n[bold cyan]Enter choice (1-7): [/bold cyan]")

            if choice == '7' or choice.lower() == 'quit':
                break

            if choice == '4':
                self.show_inverted_index()
                continue

            if choice == '5':
                self.show_occurrence_matrix()
                continue

            if choice == '6':
                self.system = None
                continue

            if choice not in ['1', '2', '3']:
                console.print("[bold red]Invalid choice. Please enter a number between 1 and 7.[/bold red]")
                continue

            query = console.input("\n[bold cyan]Enter search query: [/bold cyan]")
            if not query.strip():
                console.print("[bold red]Empty query. Please try again.[/bold red]")
                continue

            top_k = self.config["search"]["top_k"]
            if choice in ['2', '3']:
                top_k_input = console.input(f"Number of results to show (default: {top_k}): ")
                if top_k_input:
                    try:
                        top_k = int(top_k_input)
                    except ValueError:
                        console.print(f"[yellow]Invalid number. Using default: {top_k}[/yellow]")

            if choice in ['1', '3']:
                self.display_results(self.search_boolean(query), "Boolean")

            if choice in ['2', '3']:
                self.display_results(self.search_tfidf(query, top_k), "TF-IDF")


def main():
    """Main entry point for the CLI application"""
    parser = argparse.ArgumentParser(
        description='WikiRetriever - Combined Boolean and TF-IDF Search System'
    )
    parser.add_argument('--documents', help='Path to documents JSON file')
    parser.add_argument('--topics', nargs='+', help='Wikipedia topics to crawl')
    parser.add_argument('--config', help='Path to a config JSON file')
    parser.add_argument('--boolean-query', help='Boolean query for Boolean search')
    parser.add_argument('--tfidf-query', help='Free text query for TF-IDF search')
    parser.add_argument('--top', type=int, help='Number of top results to display')
    parser.add_argument('--log-level', help='Logging level (default: from config)')
    args = parser.parse_args()

    try:
        config = load_config(args.config)
    except ConfigError as e:
        console.print(f"[bold red]{escape(str(e))}[/bold red]")
        sys.exit(1)

    configure_logging(args.log_level or config["logging"]["level"], console=console)

    retriever = WikiRetrieverCLI(config)

    console.print("\n")
    console.rule("[bold blue]WikiRetriever System[/bold blue]", style="blue")
    retriever.print_header()
    console.rule(style="blue")

    try:
        # Interactive mode unless queries were given on the command line
        if not args.boolean_query and not args.tfidf_query:
            if args.documents:
                retriever.load_documents(args.documents)
            elif args.topics:
                retriever.crawl_topics(args.topics)
            retriever.interactive_mode()
            return

        if args.documents:
            loaded = retriever.load_documents(args.documents)
        else:
            loaded = retriever.crawl_topics(args.topics or config["topics"])
        if not loaded:
            sys.exit(1)

        if args.boolean_query:
            console.rule("[bold yellow]Boolean Query Search[/bold yellow]", style="yellow")
            retriever.display_results(retriever.search_boolean(args.boolean_query), "Boolean")

        if args.tfidf_query:
            top_k = args.top if args.top is not None else config["search"]["top_k"]
            console.rule("[bold yellow]TF-IDF Query Search[/bold yellow]", style="yellow")
            retriever.display_results(retriever.search_tfidf(args.tfidf_query, top_k), "TF-IDF")
    except KeyboardInterrupt:
        console.print("\n[dim]Interrupted.[/dim]")
    except Exception:
        console.print("[bold red]Unexpected error:[/bold red]")
        console.print(Syntax(traceback.format_exc(), "python", theme="monokai", line_numbers=True))
        sys.exit(1)


if __name__ == "__main__":
    main()
