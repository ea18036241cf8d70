"""Shared constants for git-cleanup."""

# git config keys used to remember user choices between runs
WORKTREE_IGNORE_KEY = "cleanup.ignore"
IGNORED_BRANCHES_KEY = "cleanup.ignoredBranches"
WORKTREE_CONFIG_EXTENSION = "extensions.worktreeconfig"

# Porcelain / format output tokens
GONE_MARKER = "[gone]"
HEAD_MARKER = "*"
GONE_HEAD_LINE = f"{GONE_MARKER} {HEAD_MARKER}"
BRANCH_REF_PREFIX = "refs/heads/"

# for-each-ref style formats passed to `git branch --format`
TRACKING_HEAD_FORMAT = "%(upstream:track) %(HEAD)"
NAME_TRACKING_FORMAT = "%(refname:short)%(upstream:track)"

# Backup branch naming: <parent>-backup or <parent>-backup<N>
BACKUP_SUFFIX = "-backup"

# Prompt messages
WORKTREE_PROMPT = "Which worktrees do you want to clean up?"
BRANCH_PROMPT = "Which branches do you want to clean up?"

# Label decoration
DIRTY_MARKER = "(dirty)"
DIRTY_STYLE = "red"

# Symbols for the summary
SYMBOL_DONE = "✓"
SYMBOL_SKIPPED = "-"
