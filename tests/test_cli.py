"""Tests for the command-line entry point."""

from unittest import mock

import pytest

from review_waiting_list import cli
from review_waiting_list.github_client import GitHubAPIError


PRS = [
    {"title": "[WIP] draft", "url": "u1", "author": {"login": "a"}},
    {"title": "Add some tests", "url": "u2", "author": {"login": "ohbarye"},
     "labels": {"nodes": [{"name": "enhancement"}]}},
]


@pytest.fixture
def client():
    with mock.patch.object(cli, "GitHubClient") as cls:
        cls.return_value.search_pull_requests.return_value = PRS
        yield cls.return_value


class TestMain:
    def test_prints_lines(self, client, capsys):
        assert cli.main(["--owner", "org", "--label", "enhancement", "--token", "x"]) == 0
        out = capsys.readouterr().out
        assert "1. `Add some tests` u2 by ohbarye (no reviewer assigned)" in out
        assert "draft" not in out
        client.search_pull_requests.assert_called_once_with("is:open is:pr archived:false user:org")

    def test_empty_result(self, client, capsys):
        assert cli.main(["--exclude-label", "enhancement", "--token", "x"]) == 0
        assert cli.EMPTY_MESSAGE in capsys.readouterr().out

    def test_api_error(self, client, capsys):
        client.search_pull_requests.side_effect = GitHubAPIError("boom")
        assert cli.main(["--token", "x"]) == 1
        assert "boom" in capsys.readouterr().out

    def test_conflicting_flags(self, client):
        assert cli.main(["--label", "a", "--exclude-label", "b", "--token", "x"]) == 1

    def test_author_feeds_query(self, client):
        assert cli.main(["--author", "ohbarye", "--token", "x"]) == 0
        client.search_pull_requests.assert_called_once_with("is:open is:pr archived:false author:ohbarye")

    def test_env_conditions_apply_with_author(self, client, capsys, monkeypatch):
        monkeypatch.setenv("LABEL", "-enhancement")
        assert cli.main(["--author", "ohbarye", "--token", "x"]) == 0
        assert cli.EMPTY_MESSAGE in capsys.readouterr().out

    def test_env_conditions_merge_with_flags(self, client, capsys, monkeypatch):
        monkeypatch.setenv("LABEL", "-enhancement")
        assert cli.main(["--exclude-author", "someone", "--token", "x"]) == 0
        assert cli.EMPTY_MESSAGE in capsys.readouterr().out

    def test_flag_overrides_env_for_same_field(self, client, capsys, monkeypatch):
        monkeypatch.setenv("LABEL", "-enhancement")
        assert cli.main(["--label", "enhancement", "--token", "x"]) == 0
        assert "1. `Add some tests` u2" in capsys.readouterr().out
