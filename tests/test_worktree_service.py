"""Tests for WorktreeService"""
import pytest

from git_cleanup.exceptions import GitOperationError
from git_cleanup.models.worktree import RemovableWorktree
from git_cleanup.services.git.worktrees import WorktreeService

TRACK = ("branch", "--format", "%(upstream:track) %(HEAD)")
IGNORE = ("config", "--worktree", "--get", "cleanup.ignore")
STATUS = ("status", "--porcelain")
ENABLE = ("config", "extensions.worktreeconfig", "true")


def expect_worktree(fake_git, path, track="", ignore=None, status=""):
    """Script the three per-worktree queries."""
    fake_git.expect("-C", path, *TRACK, output=track)
    if ignore is None:
        fake_git.expect("-C", path, *IGNORE, error=True)
    else:
        fake_git.expect("-C", path, *IGNORE, output=ignore)
    fake_git.expect("-C", path, *STATUS, output=status)


@pytest.fixture
def scripted_worktrees(fake_git, worktree_list_output):
    """Primary + two gone worktrees + a detached worktree whose other branch is gone."""
    fake_git.expect(*ENABLE)
    fake_git.expect("worktree", "list", "--porcelain", output=worktree_list_output)
    expect_worktree(fake_git, "/dev/worktree-1", track="[gone] *", ignore="true", status=" M file.txt")
    expect_worktree(fake_git, "/dev/worktree-2", track="[gone] *", ignore="false")
    expect_worktree(fake_git, "/dev/worktree-3", track=" *\n[gone]  ")
    return fake_git


class TestListWorktrees:
    """Test worktree listing."""

    def test_get_worktrees_skips_primary(self, fake_git, worktree_list_output):
        """Test that the primary worktree is never returned."""
        fake_git.expect("worktree", "list", "--porcelain", output=worktree_list_output)
        service = WorktreeService(fake_git)

        assert service.get_worktrees() == ["/dev/worktree-1", "/dev/worktree-2", "/dev/worktree-3"]

    def test_get_branch_worktrees(self, fake_git, worktree_list_output):
        """Test that detached worktrees are left out of the branch map."""
        fake_git.expect("worktree", "list", "--porcelain", output=worktree_list_output)
        service = WorktreeService(fake_git)

        assert service.get_branch_worktrees() == {
            "main": "/dev/project",
            "worktree-1": "/dev/worktree-1",
            "worktree-2": "/dev/worktree-2",
        }


class TestGetRemovableWorktrees:
    """Test worktree classification."""

    @pytest.mark.parametrize("max_workers", [1, 8])
    def test_returns_worktrees_with_gone_branch(self, scripted_worktrees, max_workers):
        """Test that only worktrees whose current branch is gone are returned."""
        service = WorktreeService(scripted_worktrees, max_workers=max_workers)

        assert service.get_removable_worktrees() == [
            RemovableWorktree(path="/dev/worktree-1", ignored=True, dirty=True),
            RemovableWorktree(path="/dev/worktree-2", ignored=False, dirty=False),
        ]
        scripted_worktrees.assert_all_called()

    def test_primary_worktree_is_never_queried(self, scripted_worktrees):
        """Test that the primary worktree is excluded regardless of its state."""
        scripted_worktrees.expect("-C", "/dev/project", *TRACK, output="[gone] *")
        service = WorktreeService(scripted_worktrees, max_workers=4)

        paths = [wt.path for wt in service.get_removable_worktrees()]

        assert "/dev/project" not in paths
        assert not scripted_worktrees.called("-C", "/dev/project", *TRACK)

    def test_enables_worktree_config_once(self, scripted_worktrees):
        """Test that the repository wide toggle is written once, not per worktree."""
        scripted_worktrees.expect("-C", "/dev/worktree-2", "config", "--worktree", "cleanup.ignore", "true")
        service = WorktreeService(scripted_worktrees, max_workers=4)

        service.get_removable_worktrees()
        service.ignore_worktree("/dev/worktree-2")

        assert scripted_worktrees.called("-C", "/dev/worktree-2", "config", "--worktree", "cleanup.ignore", "true")
        assert scripted_worktrees.count(*ENABLE) == 1
        assert scripted_worktrees.calls[0] == ENABLE

    def test_prunable_worktree_is_skipped(self, fake_git):
        """Test that a worktree with a missing directory is never queried."""
        fake_git.expect(*ENABLE)
        fake_git.expect(
            "worktree",
            "list",
            "--porcelain",
            output=(
                "worktree /repo\nHEAD abc\nbranch refs/heads/main\n\n"
                "worktree /missing\nHEAD def\nbranch refs/heads/old\nprunable gitdir file points to non-existent location\n\n"
                "worktree /wt\nHEAD 123\nbranch refs/heads/x\n"
            ),
        )
        expect_worktree(fake_git, "/wt", track="[gone] *")
        service = WorktreeService(fake_git, max_workers=4)

        assert service.get_removable_worktrees() == [RemovableWorktree(path="/wt")]
        assert not any("/missing" in call for call in fake_git.calls)

    def test_no_candidates(self, fake_git):
        """Test a repository with only the primary worktree."""
        fake_git.expect(*ENABLE)
        fake_git.expect("worktree", "list", "--porcelain", output="worktree /repo\nHEAD abc\nbranch refs/heads/main\n")
        service = WorktreeService(fake_git)

        assert service.get_removable_worktrees() == []

    def test_missing_ignore_flag_means_not_ignored(self, fake_git):
        """Test that a failing config lookup is treated as not ignored."""
        fake_git.expect("worktree", "list", "--porcelain", output="worktree /repo\n\nworktree /wt\nbranch refs/heads/x\n")
        expect_worktree(fake_git, "/wt", track="[gone] *")
        service = WorktreeService(fake_git)

        assert service.is_ignored("/wt") is False

    def test_tracking_query_failure_propagates(self, fake_git):
        """Test that an unexpected failure of the tracking query is raised."""
        fake_git.expect(*ENABLE)
        fake_git.expect("worktree", "list", "--porcelain", output="worktree /repo\n\nworktree /wt\nbranch refs/heads/x\n")
        fake_git.expect("-C", "/wt", *TRACK, error=True)
        fake_git.expect("-C", "/wt", *IGNORE, error=True)
        fake_git.expect("-C", "/wt", *STATUS)
        service = WorktreeService(fake_git, max_workers=4)

        with pytest.raises(GitOperationError):
            service.get_removable_worktrees()


class TestWorktreeMutations:
    """Test deleting, ignoring and detaching worktrees."""

    def test_delete_worktree(self, fake_git):
        """Test that removal is forced and echoed."""
        fake_git.expect("worktree", "remove", "/dev/worktree-1", "--force")
        service = WorktreeService(fake_git)

        service.delete_worktree("/dev/worktree-1")

        assert fake_git.echoed == [("worktree", "remove", "/dev/worktree-1", "--force")]

    def test_delete_worktree_failure_raises(self, fake_git):
        fake_git.expect("worktree", "remove", "/dev/worktree-1", "--force", error=True)
        service = WorktreeService(fake_git)

        with pytest.raises(GitOperationError):
            service.delete_worktree("/dev/worktree-1")

    def test_ignore_worktree(self, fake_git):
        """Test that worktree config is enabled before the flag is written."""
        fake_git.expect(*ENABLE)
        fake_git.expect("-C", "/dev/worktree-1", "config", "--worktree", "cleanup.ignore", "true")
        service = WorktreeService(fake_git)

        service.ignore_worktree("/dev/worktree-1")

        assert fake_git.calls == [
            ENABLE,
            ("-C", "/dev/worktree-1", "config", "--worktree", "cleanup.ignore", "true"),
        ]

    def test_custom_ignore_key(self, fake_git):
        fake_git.expect(*ENABLE)
        fake_git.expect("-C", "/wt", "config", "--worktree", "tidy.skip", "true")
        service = WorktreeService(fake_git, ignore_key="tidy.skip")

        service.ignore_worktree("/wt")

        fake_git.assert_all_called()

    def test_detach_worktree(self, fake_git):
        fake_git.expect("-C", "/dev/worktree-1", "switch", "--detach")
        service = WorktreeService(fake_git)

        service.detach_worktree("/dev/worktree-1")

        assert fake_git.echoed == [("-C", "/dev/worktree-1", "switch", "--detach")]

    def test_process_selection(self, fake_git):
        """Test that selected worktrees are removed and deselected ones ignored."""
        fake_git.expect(*ENABLE)
        fake_git.expect("worktree", "remove", "/wt-1", "--force")
        fake_git.expect("worktree", "remove", "/wt-2", "--force")
        fake_git.expect("-C", "/wt-3", "config", "--worktree", "cleanup.ignore", "true")
        service = WorktreeService(fake_git, max_workers=4)

        service.process_selection(["/wt-1", "/wt-2"], ["/wt-3"])

        fake_git.assert_all_called()
        assert len(fake_git.calls) == 4

    def test_process_empty_selection(self, fake_git):
        """Test that nothing runs when nothing was chosen."""
        service = WorktreeService(fake_git)

        service.process_selection([], [])

        assert fake_git.calls == []
