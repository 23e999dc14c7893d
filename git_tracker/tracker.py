"""Tracker - owns the change log and drives the commit workflow."""

from enum import Enum
from pathlib import Path
from typing import Optional

from git_tracker import DEFAULT_CHANGE_TYPE
from git_tracker.changes import Change, ChangeStore
from git_tracker.config import ConfigManager
from git_tracker.git import GitGateway, DEFAULT_REMOTE
from git_tracker.messages import CommitMessageBuilder, is_empty_message
from git_tracker.output import (
    bold, dim, colorize_change_type, print_success, print_error, print_detail, Spinner,
)


class CommitOutcome(Enum):
    """Where a commit-and-push run stopped."""
    NO_CHANGES_RECORDED = "no_changes_recorded"
    NOT_A_REPO = "not_a_repo"
    NO_GIT_CHANGES = "no_git_changes"
    STAGING_FAILED = "staging_failed"
    NOTHING_STAGED = "nothing_staged"
    EMPTY_MESSAGE = "empty_message"
    COMMIT_FAILED = "commit_failed"
    PUSH_SKIPPED_NO_REMOTE = "push_skipped_no_remote"
    PUSH_SKIPPED = "push_skipped"
    PUSH_FAILED = "push_failed"
    PUSHED = "pushed"
    PUSHED_NEW_BRANCH = "pushed_new_branch"

    @property
    def committed(self) -> bool:
        return self in _COMMITTED

    @property
    def clears_log(self) -> bool:
        return self.committed and self is not CommitOutcome.PUSH_FAILED


_COMMITTED = {
    CommitOutcome.PUSH_SKIPPED_NO_REMOTE,
    CommitOutcome.PUSH_SKIPPED,
    CommitOutcome.PUSH_FAILED,
    CommitOutcome.PUSHED,
    CommitOutcome.PUSHED_NEW_BRANCH,
}


class Tracker:
    """Loads both stores for one invocation and is the only writer of the log."""

    def __init__(self, root: Optional[Path] = None, git: Optional[GitGateway] = None):
        self.root = Path(root) if root is not None else Path.cwd()
        self.config_manager = ConfigManager(self.root)
        self.config = self.config_manager.load()
        self.store = ChangeStore(self.root)
        self.changes: list[Change] = self.store.load()
        self.git = git if git is not None else GitGateway(cwd=self.root)

    def _save(self) -> None:
        self.store.save(self.changes)

    def _clear(self) -> None:
        self.changes.clear()
        self._save()

    def add_change(self, description: str, change_type: str = DEFAULT_CHANGE_TYPE) -> Change:
        """Record a change along with the files git currently sees as modified."""
        change = Change.now(description, change_type, self.git.modified_files())
        self.changes.append(change)
        self._save()

        print_success(f"Recorded {change_type}: {description}")
        if change.files:
            print(f"  Modified files: {', '.join(change.files)}")
        return change

    def list_changes(self) -> None:
        if not self.changes:
            print("No changes recorded yet")
            return

        print(f"\n{bold('Recorded changes:')}")
        for i, change in enumerate(self.changes, 1):
            print(f"{i}. {dim(f'[{change.stamp}]')} {colorize_change_type(change.type)}: {change.description}")
            if change.files:
                print(f"   Files: {', '.join(change.files)}")

    def generate_commit_message(self) -> str:
        return CommitMessageBuilder(self.config.commit_templates).build(self.changes)

    def commit_and_push(self, branch: Optional[str] = None, no_push: bool = False) -> CommitOutcome:
        """Stage everything, commit with the generated message, then push.

        Each step that fails prints why and stops. The log is cleared once a
        commit lands, except when the push itself fails.
        """
        outcome = self._commit_and_push(branch, no_push)
        if outcome.clears_log:
            self._clear()
        return outcome

    def _commit_and_push(self, branch: Optional[str], no_push: bool) -> CommitOutcome:
        if not self.changes:
            print("No changes to commit")
            return CommitOutcome.NO_CHANGES_RECORDED

        if not self.git.is_work_tree():
            print_error("Not in a git repository")
            return CommitOutcome.NOT_A_REPO

        # The working tree decides, not the recorded log
        if not self.git.has_worktree_changes():
            print("No git changes detected to commit")
            return CommitOutcome.NO_GIT_CHANGES

        branch = branch or self.git.current_branch() or self.config.default_branch

        print("Staging changes...")
        if not self.git.stage_all():
            print_error("Failed to stage changes")
            print_detail(self.git.last_error)
            return CommitOutcome.STAGING_FAILED

        if not self.git.has_staged_changes():
            print_error("No changes were staged")
            return CommitOutcome.NOTHING_STAGED

        message = self.generate_commit_message()
        if is_empty_message(message):
            print_error("Empty commit message, nothing to commit")
            return CommitOutcome.EMPTY_MESSAGE

        print("Committing changes...")
        if not self.git.commit(message):
            print_error("Failed to commit changes")
            print_detail(self.git.last_error)
            return CommitOutcome.COMMIT_FAILED

        if no_push or not self.config.auto_push:
            print_success("Successfully committed changes (push skipped)")
            return CommitOutcome.PUSH_SKIPPED

        return self._push(branch)

    def _push(self, branch: str) -> CommitOutcome:
        print("Pushing to remote...")

        if not self.git.has_remote(DEFAULT_REMOTE):
            print_error(f"Remote '{DEFAULT_REMOTE}' not found")
            print_success("Changes committed successfully (push skipped - no remote)")
            return CommitOutcome.PUSH_SKIPPED_NO_REMOTE

        create = not self.git.remote_branch_exists(branch, DEFAULT_REMOTE)
        if create:
            print(f"Creating new remote branch '{branch}'...")

        with Spinner():
            pushed = self.git.push(branch, DEFAULT_REMOTE, set_upstream=create)

        if not pushed:
            print_error("Failed to push changes to remote")
            print_detail(self.git.last_error)
            print("  Your commits are saved locally. To push later, run:")
            print(f"  git push {DEFAULT_REMOTE} {branch}")
            return CommitOutcome.PUSH_FAILED

        print_success(f"Successfully pushed changes to {branch}")
        return CommitOutcome.PUSHED_NEW_BRANCH if create else CommitOutcome.PUSHED
