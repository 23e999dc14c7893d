"""CLI Commands"""

import os
import sys

from git_tracker.config import ConfigManager
from git_tracker.output import bold, dim, info


def display_config(manager: ConfigManager) -> int:
    """Display current configuration."""
    config = manager.load()

    print(f"\n{bold('Current Configuration')}\n")

    if manager.created:
        print(f"  {dim('Created with defaults:')} {manager.path}")
    else:
        print(f"  {dim('Loaded from:')} {manager.path}")

    if os.environ.get('GT_VERBOSE'):
        print(f"  {dim('Environment overrides:')}")
        print(f"    GT_VERBOSE={os.environ['GT_VERBOSE']}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    default_branch: {info(config.default_branch)}")
    print(f"    auto_push:      {info(str(config.auto_push).lower())}")
    print(f"    commit_templates:")
    width = max((len(name) for name in config.commit_templates), default=0)
    for name, template in config.commit_templates.items():
        print(f"      {name.ljust(width)}  {info(template)}")

    print(f"\n  {dim('Edit')} {manager.CONFIG_FILENAME} {dim('to change these settings')}\n")
    return 0


def run_install_completion() -> int:
    """Show shell tab completion setup."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell:
        rc_file = os.path.expanduser('~/.zshrc')
        line = 'eval "$(register-python-argcomplete gt)"'
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ~/.zshrc')}")
    elif 'bash' in shell:
        rc_file = os.path.expanduser('~/.bashrc')
        line = 'eval "$(register-python-argcomplete gt)"'
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ~/.bashrc')}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell gt | Out-String | Invoke-Expression\n")
        print("To make it permanent, add to your $PROFILE:\n")
        print("  register-python-argcomplete --shell powershell gt | Out-String | Invoke-Expression")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print('  eval "$(register-python-argcomplete gt)"\n')
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish gt | source")

    print(f"\n{dim('After setup, press TAB to complete commands and change types.')}")
    return 0
