"""Branch models"""
from dataclasses import dataclass


@dataclass(frozen=True)
class BranchListing:
    """A local branch and whether its upstream was deleted."""
    name: str
    gone: bool = False


@dataclass(frozen=True)
class RemovableBranch:
    """A local branch that can be cleaned up."""
    name: str
    ignored: bool = False  # Listed in the ignored branches config
