"""
Tests for the command line surface: argument parsing and end-to-end runs.

Run with:
    pytest tests/test_cli.py -v
"""

import json

import pytest

from git_tracker import __version__
from git_tracker.cli.args import complete_change_types, parse_args
from git_tracker.cli.main import main
from git_tracker.git import GitGateway, GitError


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run from an empty directory with git queries stubbed out."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GT_VERBOSE", raising=False)
    monkeypatch.setattr(GitGateway, "modified_files", lambda self: [])
    return tmp_path


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class TestParseArgs:

    def test_add_defaults_to_feature(self):
        args = parse_args(["add", "fix bug"])
        assert args.command == "add"
        assert args.message == "fix bug"
        assert args.change_type == "feature"

    @pytest.mark.parametrize("flag", ["-t", "--type"])
    def test_add_type(self, flag):
        args = parse_args(["add", "fix bug", flag, "fix"])
        assert args.change_type == "fix"

    def test_add_accepts_any_type(self):
        assert parse_args(["add", "x", "-t", "perf"]).change_type == "perf"

    @pytest.mark.parametrize("alias, command", [("a", "add"), ("c", "commit"), ("l", "list")])
    def test_aliases(self, alias, command):
        argv = [alias, "msg"] if alias == "a" else [alias]
        assert parse_args(argv).command == command

    def test_commit_defaults(self):
        args = parse_args(["commit"])
        assert args.branch is None
        assert args.no_push is False

    def test_commit_options(self):
        args = parse_args(["commit", "-b", "release", "--no-push"])
        assert args.branch == "release"
        assert args.no_push is True

    def test_verbose_flag(self):
        assert parse_args(["--verbose", "list"]).verbose is True

    def test_add_requires_message(self, capsys):
        with pytest.raises(SystemExit) as exc:
            parse_args(["add"])
        assert exc.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            parse_args(["--version"])
        assert __version__ in capsys.readouterr().out



class TestCompleteChangeTypes:

    def test_builtin_types_without_config(self, workdir):
        names = complete_change_types()
        assert names[0] == "feature"
        assert "chore" in names
        assert not (workdir / ".gt-config.json").exists()

    def test_includes_configured_templates(self, workdir):
        (workdir / ".gt-config.json").write_text(json.dumps({
            "commit_templates": {"feature": "feat: {message}", "perf": "perf: {message}"},
        }))
        assert "perf" in complete_change_types()

    def test_filters_by_prefix(self, workdir):
        (workdir / ".gt-config.json").write_text(json.dumps({
            "commit_templates": {"perf": "perf: {message}"},
        }))
        assert complete_change_types(prefix="f") == ["feature", "fix"]
        assert complete_change_types(prefix="pe") == ["perf"]

    def test_broken_config_falls_back_to_builtin(self, workdir):
        (workdir / ".gt-config.json").write_text("[1, 2")
        assert "perf" not in complete_change_types()
        assert "fix" in complete_change_types()


# ---------------------------------------------------------------------------
# End-to-end runs
# ---------------------------------------------------------------------------

class TestMain:

    def test_no_command_prints_help(self, workdir, capsys):
        assert main([]) == 1
        assert "usage: gt" in capsys.readouterr().out

    def test_add_creates_log_in_fresh_directory(self, workdir):
        assert main(["add", "fix bug", "--type", "fix"]) == 0

        entries = json.loads((workdir / ".gt-changes.json").read_text())
        assert len(entries) == 1
        assert entries[0]["type"] == "fix"
        assert entries[0]["description"] == "fix bug"
        assert (workdir / ".gt-config.json").exists()

    def test_list_after_add(self, workdir, capsys):
        main(["a", "write docs", "-t", "docs"])
        capsys.readouterr()
        assert main(["l"]) == 0
        assert "docs: write docs" in capsys.readouterr().out

    def test_commit_with_empty_log(self, workdir, capsys, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("git should not be called")
        monkeypatch.setattr(GitGateway, "_run", fail)

        assert main(["commit"]) == 0
        assert capsys.readouterr().out == "No changes to commit\n"

    def test_workflow_failure_exits_zero(self, workdir, capsys, monkeypatch):
        main(["add", "X"])
        monkeypatch.setattr(GitGateway, "is_work_tree", lambda self: False)
        assert main(["commit"]) == 0
        assert "Not in a git repository" in capsys.readouterr().err

    def test_malformed_log_is_fatal(self, workdir, capsys):
        (workdir / ".gt-changes.json").write_text("{{{")
        assert main(["list"]) == 1
        assert "Could not parse" in capsys.readouterr().err

    def test_undecodable_log_is_fatal(self, workdir, capsys):
        (workdir / ".gt-changes.json").write_bytes(b'[{"description": "\xff"}]')
        assert main(["list"]) == 1
        assert "Could not parse" in capsys.readouterr().err

    def test_malformed_config_is_fatal(self, workdir, capsys):
        (workdir / ".gt-config.json").write_text("{{{")
        assert main(["add", "X"]) == 1
        assert not (workdir / ".gt-changes.json").exists()

    def test_missing_git_is_fatal(self, workdir, capsys, monkeypatch):
        def missing(self):
            raise GitError("Git is not installed or not in PATH")
        monkeypatch.setattr(GitGateway, "modified_files", missing)
        assert main(["add", "X"]) == 1
        assert "Git is not installed" in capsys.readouterr().err

    def test_config_command(self, workdir, capsys):
        assert main(["config"]) == 0
        out = capsys.readouterr().out
        assert "Created with defaults" in out
        assert "default_branch" in out
        assert "feat: {message}" in out

    def test_config_command_existing_file(self, workdir, capsys):
        main(["config"])
        capsys.readouterr()
        main(["config"])
        assert "Loaded from" in capsys.readouterr().out

    def test_completion_command(self, workdir, capsys, monkeypatch):
        monkeypatch.setenv("SHELL", "/bin/bash")
        assert main(["completion"]) == 0
        assert "register-python-argcomplete gt" in capsys.readouterr().out
