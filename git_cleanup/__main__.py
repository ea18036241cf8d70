"""Allow running git-cleanup with `python -m git_cleanup`."""

import sys

from git_cleanup.cli import main

sys.exit(main())
