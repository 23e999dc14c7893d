import sys

from git_tracker.cli import main

sys.exit(main())
