"""Integration tests for RealGitConfigOps against a real git repository."""

import shutil
from pathlib import Path

import pytest

from gitconf.gateway.git.config_ops.real import RealGitConfigOps
from gitconf.gateway.process.real import RealProcessRunner
from gitconf.gateway.process.types import CommandError

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed"),
]

ORIGIN_REFSPEC = "+refs/heads/*:refs/remotes/origin/*"


@pytest.fixture
def config(git_runner: RealProcessRunner) -> RealGitConfigOps:
    return RealGitConfigOps(git_runner)


def test_set_then_get(config: RealGitConfigOps) -> None:
    config.set("gitconf.test", "hello world")

    assert config.get("gitconf.test") == "hello world"
    assert config.get_all("gitconf.test") == ["hello world"]


def test_set_replaces_all_values(config: RealGitConfigOps) -> None:
    config.set("gitconf.multi", ["a", "b"])
    config.set("gitconf.multi", "c")

    assert config.get_all("gitconf.multi") == ["c"]


def test_add_unique_is_idempotent(config: RealGitConfigOps) -> None:
    first = config.add("include.path", ["one", "two"], unique=True)
    second = config.add("include.path", ["one", "two"], unique=True)

    assert first == ["one", "two"]
    assert second == []
    assert config.get_all("include.path") == ["one", "two"]


def test_get_missing_key(config: RealGitConfigOps) -> None:
    assert config.get("gitconf.missing") is None
    assert config.get_all("gitconf.missing") == []
    assert config.get_regex("^gitconf\\.") == {}


def test_get_invalid_key_reads_as_missing(config: RealGitConfigOps) -> None:
    assert config.get("nosection") is None


def test_unset_matching_treats_values_literally(config: RealGitConfigOps) -> None:
    config.set("remote.origin.fetch", [ORIGIN_REFSPEC, "+refs/tags/*:refs/tags/*"])

    removed = config.unset_matching("remote.origin.fetch", [ORIGIN_REFSPEC, "absent"])

    assert removed == [ORIGIN_REFSPEC]
    assert config.get_all("remote.origin.fetch") == ["+refs/tags/*:refs/tags/*"]


def test_unset_missing_key_raises(config: RealGitConfigOps) -> None:
    with pytest.raises(CommandError) as exc_info:
        config.unset("gitconf.missing")

    assert exc_info.value.exit_status == 5


def test_get_regex_and_subsections(config: RealGitConfigOps) -> None:
    config.set("remote.origin.url", "https://example.com/origin.git")
    config.set("remote.origin.fetch", ORIGIN_REFSPEC)
    config.set("remote.upstream.url", "https://example.com/upstream.git")

    assert config.get_regex("^remote\\.origin\\.") == {
        "remote.origin.url": ["https://example.com/origin.git"],
        "remote.origin.fetch": [ORIGIN_REFSPEC],
    }
    assert config.subsections("remote") == ["origin", "upstream"]


def test_remove_and_rename_section(config: RealGitConfigOps) -> None:
    config.set("remote.origin.url", "u1")
    config.rename_section("remote.origin", "remote.old")

    assert config.section_exists("remote.old")
    assert not config.section_exists("remote.origin")

    config.remove_section("remote.old")

    assert not config.section_exists("remote.old")


def test_remove_missing_section_raises(config: RealGitConfigOps) -> None:
    assert not config.section_exists("remote.gone")

    with pytest.raises(CommandError) as exc_info:
        config.remove_section("remote.gone")

    assert "no such section" in exc_info.value.stderr


def test_global_scope_writes_isolated_global_file(
    config: RealGitConfigOps, git_env: dict[str, str]
) -> None:
    config.set("gitconf.where", "global", scope="global")
    config.set("gitconf.where", "local", scope="local")

    assert config.get("gitconf.where", scope="global") == "global"
    assert config.get("gitconf.where", scope="local") == "local"
    # Local configuration overrides global for the merged view
    assert config.get("gitconf.where") == "local"
    assert config.get_all("gitconf.where") == ["global", "local"]
    assert "where = global" in Path(git_env["GIT_CONFIG_GLOBAL"]).read_text(encoding="utf-8")


def test_set_keeps_empty_last_value(config: RealGitConfigOps) -> None:
    config.set("gitconf.multi", ["a", ""])

    assert config.get_all("gitconf.multi") == ["a", ""]
    assert config.get("gitconf.multi") == ""


def test_non_utf8_value_is_read_without_raising(
    config: RealGitConfigOps, git_repo: Path
) -> None:
    with (git_repo / ".git" / "config").open("ab") as config_file:
        config_file.write(b"[legacy]\n\tname = Jos\xe9\n")

    value = config.get("legacy.name")

    assert value is not None
    assert value.encode("utf-8", errors="surrogateescape") == b"Jos\xe9"
    assert config.get_regex("^legacy\\.") == {"legacy.name": [value]}
