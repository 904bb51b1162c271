from __future__ import annotations

from typing import Iterable


SEARCH_PULL_REQUESTS_QUERY = """
query SearchPullRequests($query: String!, $first: Int!) {
  search(query: $query, type: ISSUE, first: $first) {
    nodes {
      ... on PullRequest {
        title
        url
        author { login }
        labels(first: 100) {
          nodes { name }
        }
        reviewRequests(first: 100) {
          nodes {
            requestedReviewer {
              ... on User { login }
              ... on Team { name }
              ... on Bot { login }
              ... on Mannequin { login }
            }
          }
        }
      }
    }
  }
}
"""


def build_search_query(
    *,
    authors: Iterable[str] = (),
    owners: Iterable[str] = (),
    repos: Iterable[str] = (),
) -> str:
    terms = ["is:open", "is:pr", "archived:false"]
    terms.extend(f"author:{a.strip()}" for a in authors if a.strip())
    terms.extend(f"user:{o.strip()}" for o in owners if o.strip())
    terms.extend(f"repo:{r.strip()}" for r in repos if r.strip())
    return " ".join(terms)
