from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class UserReviewer:
    login: str

    @property
    def identifier(self) -> str:
        return self.login


@dataclass(frozen=True)
class TeamReviewer:
    name: str

    @property
    def identifier(self) -> str:
        return self.name


Reviewer = Union[UserReviewer, TeamReviewer]


def reviewer_from_node(requested_reviewer: Mapping[str, Any] | None) -> Reviewer | None:
    """Build a reviewer from a GraphQL ``requestedReviewer`` object (User or Team)."""
    node = requested_reviewer or {}
    if node.get("login"):
        return UserReviewer(login=node["login"])
    if node.get("name"):
        return TeamReviewer(name=node["name"])
    return None


def _nodes(connection: Mapping[str, Any] | None) -> list[Mapping[str, Any]]:
    return [n for n in ((connection or {}).get("nodes") or []) if isinstance(n, Mapping)]


def label_names(pr: Mapping[str, Any]) -> list[str]:
    return [n["name"] for n in _nodes(pr.get("labels")) if n.get("name")]


def requested_reviewers(pr: Mapping[str, Any]) -> list[Reviewer]:
    reviewers: list[Reviewer] = []
    for node in _nodes(pr.get("reviewRequests")):
        reviewer = reviewer_from_node(node.get("requestedReviewer"))
        if reviewer is not None:
            reviewers.append(reviewer)
    return reviewers


def author_login(pr: Mapping[str, Any]) -> str:
    return (pr.get("author") or {}).get("login") or ""
