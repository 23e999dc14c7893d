"""
Git Tracker

Record changes between commits, then collapse them into one structured commit.
"""

__version__ = "1.0.0"

# Built-in change types - single source of truth
# Used by: config (seeded templates), cli/args.py (--type completion), output (colors)
CHANGE_TYPES = {
    'feature': 'feat: {message}',
    'fix': 'fix: {message}',
    'docs': 'docs: {message}',
    'style': 'style: {message}',
    'refactor': 'refactor: {message}',
    'test': 'test: {message}',
    'chore': 'chore: {message}',
}

CHANGE_TYPE_NAMES = list(CHANGE_TYPES.keys())

# Commit message generation falls back to this type's template
DEFAULT_CHANGE_TYPE = 'feature'

MESSAGE_PLACEHOLDER = '{message}'
