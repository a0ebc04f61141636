"""Command line interface for operating NewsHub."""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from newshub.domain import Article, NewsQuery, Region
from newshub.services.news import build_news_container
from newshub.settings import get_log_level


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="NewsHub - news aggregator")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch = subparsers.add_parser(
        "fetch", help="Aggregates news and prints them as a table"
    )
    fetch.add_argument("--category", default="general", help="News category")
    fetch.add_argument("--page", type=int, default=1, help="Page number (default: 1)")
    fetch.add_argument(
        "--page-size", type=int, default=20, help="Articles per page (default: 20)"
    )
    fetch.add_argument(
        "--region",
        choices=[region.value for region in Region],
        default=None,
        help="Geographic scope",
    )
    fetch.add_argument("--country", default=None, help="Country filter")
    fetch.add_argument("--state", default=None, help="Indian state filter")
    fetch.add_argument("--district", default=None, help="District filter")

    subparsers.add_parser("serve", help="Runs the REST API with Uvicorn")
    states = subparsers.add_parser(
        "states", help="Lists the Indian states known to the classifier"
    )
    states.add_argument(
        "--districts", action="store_true", help="Also print each state's districts"
    )

    for sp in (fetch, states):
        sp.add_argument(
            "--log-level",
            default=None,
            help="Log level: DEBUG, INFO, WARNING, ERROR (default INFO)",
        )

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    console = Console()
    level_name = getattr(args, "log_level", None) or get_log_level()
    handler = RichHandler(console=console, markup=True, rich_tracebacks=True)
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )

    if args.command == "serve":
        from newshub.api import run

        run()
        return

    news_container = build_news_container()

    if args.command == "fetch":
        query = NewsQuery(
            category=args.category,
            page=args.page,
            page_size=args.page_size,
            region=Region.parse(args.region),
            state=args.state,
            district=args.district,
            country=args.country,
        )
        articles = news_container.feed_service.latest(query)
        if not articles:
            console.print("[yellow]No articles found for the given filters.[/yellow]")
            return
        console.print(_articles_table(articles, query))
    elif args.command == "states":
        for state in news_container.catalog.states:
            console.print(f"[bold]-[/bold] {state.name}")
            if args.districts:
                for district in state.districts:
                    console.print(f"    {district}")


def _articles_table(articles: Sequence[Article], query: NewsQuery) -> Table:
    table = Table(
        title=f"{query.resolved_category.value} news (page {query.page})",
        show_lines=False,
    )
    table.add_column("Published", style="cyan", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Source")
    table.add_column("Region")
    table.add_column("Location")
    for article in articles:
        location = ", ".join(
            part
            for part in (article.district, article.state, article.country)
            if part
        )
        table.add_row(
            article.published_at.strftime("%Y-%m-%d %H:%M"),
            article.title,
            article.source_name,
            article.region.value if article.region else "",
            location,
        )
    return table


if __name__ == "__main__":
    main()
