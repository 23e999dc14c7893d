"""Commit Message Builder - render the change log through the config templates."""

from git_tracker import DEFAULT_CHANGE_TYPE, MESSAGE_PLACEHOLDER
from git_tracker.changes import Change

# Returned for an empty log; callers treat it as "nothing to commit"
NO_CHANGES_MESSAGE = "No changes recorded"


class CommitMessageBuilder:
    """Turns recorded changes into a single commit message."""

    def __init__(self, templates: dict[str, str]):
        self.templates = templates

    def build(self, changes: list[Change]) -> str:
        if not changes:
            return NO_CHANGES_MESSAGE
        return '\n\n'.join(self._render_change(change) for change in changes)

    def _template_for(self, change_type: str) -> str:
        """Unknown types render with the default type's template."""
        return self.templates.get(change_type, self.templates[DEFAULT_CHANGE_TYPE])

    def _render_change(self, change: Change) -> str:
        block = self._template_for(change.type).replace(MESSAGE_PLACEHOLDER, change.description)
        if change.files:
            file_lines = '\n'.join(f"- {path}" for path in change.files)
            block = f"{block}\n\n{file_lines}"
        return block


def is_empty_message(message: str) -> bool:
    return not message.strip() or message == NO_CHANGES_MESSAGE
