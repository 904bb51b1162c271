"""Filtering logic deciding which pull requests are awaiting review."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping

from .condition import Condition
from .text_rules import is_ignorable_label, is_ignorable_title
from .types import author_login, label_names, requested_reviewers

logger = logging.getLogger(__name__)

PullRequest = Mapping[str, Any]


def unqualified(name: str) -> str:
    """Drop an ``org/`` prefix from a team slug."""
    return name.rsplit("/", 1)[-1]


def format_pull_request(pr: PullRequest, index: int) -> str:
    reviewers = [r.identifier for r in requested_reviewers(pr)]
    if reviewers:
        reviewer_clause = f"reviewer: {', '.join(reviewers)}"
    else:
        reviewer_clause = "no reviewer assigned"
    title = pr.get("title") or ""
    url = pr.get("url") or ""
    return f"{index + 1}. `{title}` {url} by {author_login(pr)} ({reviewer_clause})"


class PullRequestFilter:
    def __init__(self, pull_requests: Iterable[PullRequest], conditions: Mapping[str, Condition]) -> None:
        self.pull_requests = list(pull_requests)
        self.conditions = dict(conditions)

    def is_ignorable(self, pr: PullRequest) -> bool:
        if is_ignorable_title(pr.get("title")):
            return True
        return any(is_ignorable_label(name) for name in label_names(pr))

    def matches_label(self, pr: PullRequest) -> bool:
        condition = self.conditions.get("label")
        if condition is None:
            return True
        return condition.evaluate(label_names(pr))

    def matches_reviewer(self, pr: PullRequest) -> bool:
        condition = self.conditions.get("reviewer")
        if condition is None:
            return True
        # Teams may be written as "org/team" on either side.
        condition = condition.with_values(unqualified(v) for v in condition.values)
        return condition.evaluate(unqualified(r.identifier) for r in requested_reviewers(pr))

    def matches_author(self, pr: PullRequest) -> bool:
        condition = self.conditions.get("author")
        if condition is None:
            return True
        return condition.evaluate([author_login(pr)])

    def _matchers(self) -> tuple[tuple[str, Callable[[PullRequest], bool]], ...]:
        return (
            ("label", self.matches_label),
            ("reviewer", self.matches_reviewer),
            ("author", self.matches_author),
        )

    def matches_conditions(self, pr: PullRequest) -> bool:
        for field_name, matcher in self._matchers():
            if not matcher(pr):
                logger.debug("Dropping %s: %s condition not met", pr.get("url", ""), field_name)
                return False
        return True

    def format_pull_request(self, pr: PullRequest, index: int) -> str:
        return format_pull_request(pr, index)

    def select(self) -> list[PullRequest]:
        selected = []
        for pr in self.pull_requests:
            if self.is_ignorable(pr):
                logger.debug("Ignoring %s: marked WIP/blocked/do-not-merge", pr.get("url", ""))
                continue
            if self.matches_conditions(pr):
                selected.append(pr)
        logger.info("Selected %d of %d pull requests", len(selected), len(self.pull_requests))
        return selected

    def convert_to_message_lines(self) -> list[str]:
        return [self.format_pull_request(pr, index) for index, pr in enumerate(self.select())]
