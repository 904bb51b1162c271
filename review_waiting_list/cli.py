from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.markup import escape

from .condition import Condition
from .config import ConfigError, conditions_from_env, conditions_from_mapping
from .filters import PullRequestFilter
from .github_client import GitHubAPIError, GitHubClient
from .github_queries import build_search_query

console = Console()

EMPTY_MESSAGE = "No pull requests awaiting review."


def _conditions_from_args(args: argparse.Namespace) -> dict[str, Condition]:
    mapping: dict[str, dict] = {}
    for field_name in ("label", "reviewer"):
        included = getattr(args, field_name, None) or []
        excluded = getattr(args, f"exclude_{field_name}", None) or []
        if included and excluded:
            raise ConfigError(f"Use either --{field_name} or --exclude-{field_name}, not both.")
        if included:
            mapping[field_name] = {"values": included, "include": True}
        elif excluded:
            mapping[field_name] = {"values": excluded, "include": False}
    # --author only narrows the search query.
    if args.exclude_author:
        mapping["author"] = {"values": args.exclude_author, "include": False}
    return conditions_from_mapping(mapping)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List open pull requests awaiting review, one numbered line per PR."
    )
    parser.add_argument("--author", action="append", default=[],
                        help="Author to search for (repeatable).")
    parser.add_argument("--owner", action="append", default=[], help="User or organization to search (repeatable).")
    parser.add_argument("--repo", action="append", default=[], help="owner/repo to search (repeatable).")
    parser.add_argument("--label", action="append", default=[], help="Only PRs with one of these labels.")
    parser.add_argument("--exclude-label", action="append", default=[], help="Drop PRs with one of these labels.")
    parser.add_argument("--reviewer", action="append", default=[],
                        help="Only PRs requesting one of these users or teams (org/team accepted).")
    parser.add_argument("--exclude-reviewer", action="append", default=[],
                        help="Drop PRs requesting one of these users or teams.")
    parser.add_argument("--exclude-author", action="append", default=[], help="Drop PRs by these authors.")
    parser.add_argument("--token", default=None, help="GitHub token (defaults to GITHUB_TOKEN / GH_TOKEN).")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        conditions = {**conditions_from_env(), **_conditions_from_args(args)}
        query = build_search_query(authors=args.author, owners=args.owner, repos=args.repo)
        client = GitHubClient(token=args.token)
        pull_requests = client.search_pull_requests(query)
    except (GitHubAPIError, ConfigError) as error:
        console.print(f"[red]Error: {escape(str(error))}[/red]")
        return 1

    lines = PullRequestFilter(pull_requests, conditions).convert_to_message_lines()
    if not lines:
        console.print(EMPTY_MESSAGE)
        return 0
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
