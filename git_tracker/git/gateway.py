"""Git Gateway - the git queries and mutations the tracker needs."""

import subprocess
import sys
from pathlib import Path
from typing import Optional

from git_tracker.output import dim

DEFAULT_REMOTE = 'origin'


class GitError(Exception):
    """Raised when the git executable cannot be run at all."""
    pass


class GitGateway:
    """Runs git in a working directory.

    Ordinary git failures come back as return values; only a git binary that
    cannot be launched raises GitError.
    """

    def __init__(self, cwd: Optional[Path] = None, verbose: bool = False):
        self.cwd = Path(cwd) if cwd is not None else None
        self.verbose = verbose
        # stderr of the last command, for reporting failed mutations
        self.last_error = ""

    def _run(self, *args: str) -> subprocess.CompletedProcess:
        """Run a git command, capturing output. Never checks the exit status."""
        if self.verbose:
            print(dim(f"$ git {' '.join(args)}"), file=sys.stderr)
        try:
            result = subprocess.run(
                ['git', *args],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace'
            )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")
        except OSError as e:
            raise GitError(f"Could not run git {' '.join(args)}: {e}")
        self.last_error = result.stderr
        return result

    def _succeeds(self, *args: str) -> bool:
        return self._run(*args).returncode == 0

    # Queries

    def modified_files(self) -> list[str]:
        """Paths with unstaged modifications ('git diff --name-only')."""
        output = self._run('diff', '--name-only').stdout
        return [line for line in output.split('\n') if line.strip()]

    def current_branch(self) -> Optional[str]:
        """Checked-out branch name, or None when detached or unknown."""
        result = self._run('branch', '--show-current')
        branch = result.stdout.strip()
        if result.returncode != 0 or not branch:
            return None
        return branch

    def is_work_tree(self) -> bool:
        return self._succeeds('rev-parse', '--git-dir')

    def status(self) -> str:
        """Machine-readable working tree status; empty when clean."""
        return self._run('status', '--porcelain').stdout

    def has_worktree_changes(self) -> bool:
        return bool(self.status().strip())

    def has_staged_changes(self) -> bool:
        # --quiet exits 0 when the index matches HEAD
        return not self._succeeds('diff', '--cached', '--quiet')

    def has_remote(self, remote: str = DEFAULT_REMOTE) -> bool:
        return self._succeeds('remote', 'get-url', remote)

    def remote_branch_exists(self, branch: str, remote: str = DEFAULT_REMOTE) -> bool:
        return bool(self._run('ls-remote', '--heads', remote, branch).stdout.strip())

    # Mutations

    def stage_all(self) -> bool:
        return self._succeeds('add', '.')

    def commit(self, message: str) -> bool:
        return self._succeeds('commit', '-m', message)

    def push(self, branch: str, remote: str = DEFAULT_REMOTE, set_upstream: bool = False) -> bool:
        """Push `branch`; `set_upstream` creates and tracks it on the remote."""
        args = ['push', '-u', remote, branch] if set_upstream else ['push', remote, branch]
        return self._succeeds(*args)
