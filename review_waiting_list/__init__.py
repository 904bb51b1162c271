"""Review Waiting List.

Reports open pull requests that are waiting for review:
- Drops drafts and PRs marked WIP / blocked / do-not-merge (title or label)
- Keeps only PRs matching the configured label, reviewer and author conditions
- Renders each surviving PR as one numbered line ready to post to chat
"""

__version__ = "1.0.0"
