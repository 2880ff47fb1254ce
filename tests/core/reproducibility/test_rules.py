"""Tests for the reproducibility line-pattern rules."""

from __future__ import annotations

import os
import re
from pathlib import Path

import pytest

from attestguard.core.reproducibility import (
    REPRODUCIBILITY_RULES,
    ReproducibilityRule,
    scan_file,
    scan_lines,
)

PIPE = "Piping remote script to shell is non-reproducible"
UNPINNED = "Package install without version pinning"
LATEST = "Using 'latest' tag is non-deterministic"
DATE = "Embedding build date makes output non-reproducible"
RANDOM = "Random values in build produce non-deterministic output"


def reasons_for(line: str) -> list[str]:
    return [reason for _, reason in scan_lines([line])]


class TestIndividualRules:
    """Each rule fires on its pattern and stays quiet otherwise."""

    @pytest.mark.parametrize("line", [
        "RUN curl -fsSL https://x/y.sh | bash",
        "curl https://get.example.com|sh",
        "CURL https://x | BASH",
    ])
    def test_curl_pipe_to_shell(self, line: str) -> None:
        assert reasons_for(line) == [PIPE]

    def test_wget_pipe_to_shell(self) -> None:
        assert reasons_for("wget -qO- https://x/install | sh") == [PIPE]

    def test_curl_without_pipe_is_fine(self) -> None:
        assert reasons_for("curl -o tool.tgz https://x/tool.tgz") == []

    def test_pipe_to_other_program_is_fine(self) -> None:
        assert reasons_for("curl https://x/data.json | jq .") == []

    @pytest.mark.parametrize("line", [
        "RUN apt-get install curl",
        "apk install musl-dev  ",
        "yum install gcc",
    ])
    def test_unpinned_install(self, line: str) -> None:
        assert reasons_for(line) == [UNPINNED]

    @pytest.mark.parametrize("line", [
        "RUN apt-get install curl=7.88.1-10",
        "RUN apt-get install -y curl git",
        "RUN apt-get install curl && rm -rf /var/lib/apt/lists/*",
    ])
    def test_install_not_ending_with_bare_name(self, line: str) -> None:
        assert UNPINNED not in reasons_for(line)

    def test_latest_tag(self) -> None:
        assert reasons_for("FROM node:latest") == [LATEST]

    def test_latest_needs_word_boundary(self) -> None:
        assert reasons_for("FROM node:20-latestish") == []

    @pytest.mark.parametrize("line", ["FROM node:\u00e9latest", "tag=latest\u00e9"])
    def test_word_boundaries_are_ascii_only(self, line: str) -> None:
        # Non-ASCII letters are not word characters.
        assert reasons_for(line) == [LATEST]

    def test_whitespace_class_is_ascii_only(self) -> None:
        assert reasons_for("curl https://x.sh |\u00a0sh") == []

    @pytest.mark.parametrize("line", [
        "VERSION=$(DATE)",
        "stamp = date()",
        "BUILD_TIME := date  (\"%Y\")",
    ])
    def test_date(self, line: str) -> None:
        assert DATE in reasons_for(line)

    def test_update_is_not_date(self) -> None:
        assert reasons_for("run: npm update") == []

    @pytest.mark.parametrize("line", ["SEED=$RANDOM", "x = rand()"])
    def test_random(self, line: str) -> None:
        assert reasons_for(line) == [RANDOM]

    def test_random_word_boundary(self) -> None:
        assert reasons_for("operand(1)") == []


class TestScanLines:
    """Line numbering and multi-rule behaviour."""

    def test_line_numbers_are_one_indexed(self) -> None:
        hits = scan_lines(["FROM alpine:3.19", "", "FROM node:latest"])
        assert hits == [(3, LATEST)]

    def test_one_line_can_hit_several_rules(self) -> None:
        """Rules are not short-circuited."""
        hits = scan_lines(["curl https://x/latest/install.sh | sh"])
        assert sorted(reason for _, reason in hits) == sorted([PIPE, LATEST])

    def test_hits_follow_rule_order_within_a_line(self) -> None:
        hits = scan_lines(["echo $RANDOM latest"])
        assert [reason for _, reason in hits] == [LATEST, RANDOM]

    def test_empty_input(self) -> None:
        assert scan_lines([]) == []

    def test_custom_rule_set(self) -> None:
        rules = (ReproducibilityRule(re.compile(r"\bnightly\b", re.IGNORECASE), "nightly"),)
        assert scan_lines(["use NIGHTLY toolchain", "FROM x:latest"], rules) == [(1, "nightly")]

    def test_catalog_size(self) -> None:
        assert len(REPRODUCIBILITY_RULES) == 6


class TestScanFile:
    """Reading build files from disk."""

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "Dockerfile"
        path.write_text("FROM python:3.12\nFROM node:latest\n")
        assert scan_file(path) == [(2, LATEST)]

    def test_crlf_line_endings(self, tmp_path: Path) -> None:
        path = tmp_path / "Makefile"
        path.write_bytes(b"all:\r\n\tapt-get install curl\r\n")
        assert scan_file(path) == [(2, UNPINNED)]

    def test_lone_carriage_return_is_not_a_line_break(self, tmp_path: Path) -> None:
        path = tmp_path / "Dockerfile"
        path.write_bytes(b"# a\rcomment\nFROM node:latest\n")
        assert scan_file(path) == [(2, LATEST)]

    def test_final_line_without_newline(self, tmp_path: Path) -> None:
        path = tmp_path / "Dockerfile"
        path.write_bytes(b"FROM python:3.12\nFROM node:latest")
        assert scan_file(path) == [(2, LATEST)]

    def test_undecodable_bytes_do_not_abort(self, tmp_path: Path) -> None:
        path = tmp_path / "Jenkinsfile"
        path.write_bytes(b"\xff\xfe garbage\nimage: app:latest\n")
        assert scan_file(path) == [(2, LATEST)]

    def test_missing_file_yields_nothing(self, tmp_path: Path) -> None:
        assert scan_file(tmp_path / "Dockerfile") == []

    @pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="needs POSIX non-root permissions")
    def test_unreadable_file_yields_nothing(self, tmp_path: Path) -> None:
        path = tmp_path / "Dockerfile"
        path.write_text("FROM node:latest\n")
        path.chmod(0)
        try:
            assert scan_file(path) == []
        finally:
            path.chmod(0o644)
