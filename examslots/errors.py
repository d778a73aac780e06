class SchedulingError(Exception):
    """Base class for failures inside the coloring engine."""


class RepairStalledError(SchedulingError):
    """The conflict repair loop hit its pass cap without reaching a clean pass."""

    def __init__(self, passes: int, conflicts: int):
        self.passes = passes
        self.conflicts = conflicts
        super().__init__(
            f"repair did not converge after {passes} passes ({conflicts} conflicting edges left)"
        )


class InputFileError(OSError):
    """An input file exists but cannot be read as text."""
