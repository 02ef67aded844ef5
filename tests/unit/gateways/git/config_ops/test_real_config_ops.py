"""Tests for RealGitConfigOps against a scripted process runner.

These pin down the exact git invocations and how their output is interpreted.
"""

import pytest

from gitconf.gateway.git.config_ops.real import RealGitConfigOps
from gitconf.gateway.process.fake import FakeProcessRunner, failed, ok
from gitconf.gateway.process.types import CommandError, InvocationError


def _ops(runner: FakeProcessRunner) -> RealGitConfigOps:
    return RealGitConfigOps(runner)


# ============================================================================
# get / get_all / get_regex
# ============================================================================


def test_get_returns_value_without_trailing_newline() -> None:
    runner = FakeProcessRunner(results={("config", "user.name"): ok("Alice\n")})

    assert _ops(runner).get("user.name") == "Alice"


def test_get_passes_scope_flag() -> None:
    runner = FakeProcessRunner(results={("config", "--global", "user.name"): ok("Alice\n")})

    assert _ops(runner).get("user.name", scope="global") == "Alice"
    assert runner.calls == [["config", "--global", "user.name"]]


def test_get_returns_none_when_key_is_missing() -> None:
    runner = FakeProcessRunner(results={("config", "user.name"): failed(1)})

    assert _ops(runner).get("user.name") is None


def test_get_returns_none_for_invalid_key() -> None:
    runner = FakeProcessRunner(
        results={("config", "nodot"): failed(1, "error: key does not contain a section: nodot\n")}
    )

    assert _ops(runner).get("nodot") is None


def test_get_does_not_swallow_invocation_error() -> None:
    runner = FakeProcessRunner(executable_missing=True)

    with pytest.raises(InvocationError):
        _ops(runner).get("user.name")


def test_get_all_splits_values_in_order() -> None:
    runner = FakeProcessRunner(
        results={("config", "--local", "--get-all", "remote.origin.fetch"): ok("b\na\nb\n")}
    )

    values = _ops(runner).get_all("remote.origin.fetch", scope="local")

    assert values == ["b", "a", "b"]


def test_get_all_returns_empty_list_when_missing() -> None:
    runner = FakeProcessRunner(default_result=failed(1))

    assert _ops(runner).get_all("remote.origin.fetch") == []


def test_get_regex_groups_values_by_key() -> None:
    output = (
        "remote.origin.url git@example.com:repo.git\n"
        "remote.origin.fetch +refs/heads/*:refs/remotes/origin/*\n"
        "remote.origin.fetch +refs/tags/*:refs/tags/*\n"
        "remote.upstream.url https://example.com/repo.git\n"
    )
    runner = FakeProcessRunner(results={("config", "--get-regexp", "^remote\\."): ok(output)})

    matched = _ops(runner).get_regex("^remote\\.")

    assert matched == {
        "remote.origin.url": ["git@example.com:repo.git"],
        "remote.origin.fetch": [
            "+refs/heads/*:refs/remotes/origin/*",
            "+refs/tags/*:refs/tags/*",
        ],
        "remote.upstream.url": ["https://example.com/repo.git"],
    }
    assert list(matched) == ["remote.origin.url", "remote.origin.fetch", "remote.upstream.url"]


def test_get_regex_returns_empty_mapping_when_nothing_matches() -> None:
    runner = FakeProcessRunner(default_result=failed(1))

    assert _ops(runner).get_regex("^nothing\\.") == {}


# ============================================================================
# set / add
# ============================================================================


def test_set_replaces_by_clearing_then_adding_each_value() -> None:
    runner = FakeProcessRunner()

    written = _ops(runner).set("remote.origin.fetch", ["a", "b"], scope="local")

    assert written == ["a", "b"]
    assert runner.calls == [
        ["config", "--unset-all", "--local", "remote.origin.fetch"],
        ["config", "--local", "--add", "remote.origin.fetch", "a"],
        ["config", "--local", "--add", "remote.origin.fetch", "b"],
    ]


def test_set_treats_scalar_as_single_value() -> None:
    runner = FakeProcessRunner()

    assert _ops(runner).set("user.name", "Alice") == ["Alice"]
    assert runner.calls[-1] == ["config", "--add", "user.name", "Alice"]


def test_set_ignores_nothing_to_clear() -> None:
    """Clearing a key that has no values exits 5; replace must still write."""
    runner = FakeProcessRunner(results={("config", "--unset-all", "user.name"): failed(5)})

    written = _ops(runner).set("user.name", "Alice")

    assert written == ["Alice"]
    assert runner.calls[-1] == ["config", "--add", "user.name", "Alice"]


def test_set_raises_when_clearing_fails_and_writes_nothing() -> None:
    """A locked config file (exit 4) must not turn replace into append."""
    runner = FakeProcessRunner(
        results={
            ("config", "--unset-all", "user.name"): failed(
                4, "error: could not lock config file .git/config: File exists\n"
            )
        }
    )

    with pytest.raises(CommandError) as exc_info:
        _ops(runner).set("user.name", "Bob")

    assert exc_info.value.exit_status == 4
    assert exc_info.value.stderr == "error: could not lock config file .git/config: File exists"
    assert runner.calls == [["config", "--unset-all", "user.name"]]


def test_set_propagates_write_failure() -> None:
    runner = FakeProcessRunner(
        results={
            ("config", "--add", "nodot", "x"): failed(
                1, "error: key does not contain a section: nodot\n"
            )
        }
    )

    with pytest.raises(CommandError):
        _ops(runner).set("nodot", "x")


def test_add_appends_without_clearing() -> None:
    runner = FakeProcessRunner()

    _ops(runner).set("remote.origin.fetch", ["a"], add=True)

    assert runner.calls == [["config", "--add", "remote.origin.fetch", "a"]]


def test_add_unique_skips_present_values_preserving_order() -> None:
    runner = FakeProcessRunner(
        results={("config", "--global", "--get-all", "include.path"): ok("b\n")}
    )

    written = _ops(runner).add("include.path", ["c", "b", "a"], scope="global", unique=True)

    assert written == ["c", "a"]
    assert runner.calls[1:] == [
        ["config", "--global", "--add", "include.path", "c"],
        ["config", "--global", "--add", "include.path", "a"],
    ]


def test_add_unique_with_no_current_values_writes_everything() -> None:
    runner = FakeProcessRunner(
        results={("config", "--get-all", "include.path"): failed(1)}
    )

    assert _ops(runner).add("include.path", ["a", "b"], unique=True) == ["a", "b"]


# ============================================================================
# unset / unset_matching
# ============================================================================


def test_unset_removes_all_values() -> None:
    runner = FakeProcessRunner()

    _ops(runner).unset("user.name", scope="global")

    assert runner.calls == [["config", "--unset-all", "--global", "user.name"]]


def test_unset_propagates_missing_key() -> None:
    runner = FakeProcessRunner(default_result=failed(5))

    with pytest.raises(CommandError) as exc_info:
        _ops(runner).unset("user.name")

    assert exc_info.value.exit_status == 5


def test_unset_matching_removes_only_present_values_with_anchored_patterns() -> None:
    runner = FakeProcessRunner(
        results={("config", "--get-all", "remote.origin.fetch"): ok("a.b\nkeep\nc*\n")}
    )

    removed = _ops(runner).unset_matching("remote.origin.fetch", ["c*", "missing", "a.b"])

    assert removed == ["c*", "a.b"]
    assert runner.calls[1:] == [
        ["config", "--unset-all", "remote.origin.fetch", "^c\\*$"],
        ["config", "--unset-all", "remote.origin.fetch", "^a\\.b$"],
    ]


def test_unset_matching_with_no_overlap_runs_no_writes() -> None:
    runner = FakeProcessRunner(results={("config", "--get-all", "k.v"): ok("x\n")})

    assert _ops(runner).unset_matching("k.v", "y") == []
    assert len(runner.calls) == 1


# ============================================================================
# Sections
# ============================================================================


def test_subsections_strips_section_and_leaf_and_deduplicates() -> None:
    output = (
        "remote.origin.url u1\n"
        "remote.origin.fetch f1\n"
        "remote.upstream.url u2\n"
    )
    runner = FakeProcessRunner(results={("config", "--get-regexp", "^remote\\."): ok(output)})

    assert _ops(runner).subsections("remote") == ["origin", "upstream"]


def test_subsections_keeps_dotted_subsection_names() -> None:
    output = "branch.feature.x.remote origin\nbranch.feature.x.merge refs/heads/feature.x\n"
    runner = FakeProcessRunner(results={("config", "--get-regexp", "^branch\\."): ok(output)})

    assert _ops(runner).subsections("branch") == ["feature.x"]


def test_subsections_empty_when_section_missing() -> None:
    runner = FakeProcessRunner(default_result=failed(1))

    assert _ops(runner).subsections("remote") == []


def test_section_exists() -> None:
    runner = FakeProcessRunner(
        results={
            ("config", "--get-regexp", "^remote\\.origin\\."): ok("remote.origin.url u\n"),
            ("config", "--get-regexp", "^remote\\.gone\\."): failed(1),
        }
    )

    assert _ops(runner).section_exists("remote.origin") is True
    assert _ops(runner).section_exists("remote.gone") is False


def test_remove_section_propagates_missing_section() -> None:
    runner = FakeProcessRunner(
        results={
            ("config", "--remove-section", "remote.origin"): failed(
                128, "fatal: no such section: remote.origin\n"
            )
        }
    )

    with pytest.raises(CommandError) as exc_info:
        _ops(runner).remove_section("remote.origin")

    assert exc_info.value.exit_status == 128


def test_rename_section_invocation() -> None:
    runner = FakeProcessRunner()

    _ops(runner).rename_section("remote.origin", "remote.old", scope="local")

    assert runner.calls == [
        ["config", "--rename-section", "--local", "remote.origin", "remote.old"]
    ]


def test_unknown_scope_is_rejected() -> None:
    runner = FakeProcessRunner()

    with pytest.raises(ValueError):
        _ops(runner).get("user.name", scope="system")  # type: ignore[arg-type]
