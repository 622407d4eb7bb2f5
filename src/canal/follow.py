"""Follow filter: gate call sites to those nested under one top-level function."""

from __future__ import annotations


class FollowFilter:
    """Track whether scanning is inside the braces of the target function.

    The filter arms when the target name is seen as a call target at depth 0
    and disarms when a different call target appears at the armed depth.
    While armed, only call sites deeper than the armed depth are reportable.
    A function of the same name nested below the top level is never tracked.
    With no target every call site is reportable.
    """

    def __init__(self, target: str | None = None) -> None:
        self.target = target
        self.armed_depth: int | None = None

    @property
    def active(self) -> bool:
        return self.armed_depth is not None

    def evaluate(self, name: str, depth: int) -> bool:
        """Update the armed state for a call target and return whether it is reportable."""
        if self.target is None:
            return True

        if self.armed_depth is None:
            if depth == 0 and name == self.target:
                self.armed_depth = depth
        elif depth == self.armed_depth and name != self.target:
            self.armed_depth = None

        return self.armed_depth is not None and depth != self.armed_depth

    def reset(self) -> None:
        self.armed_depth = None
