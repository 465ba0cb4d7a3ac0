"""Error taxonomy for the habit grid."""


class DuplicateNameError(ValueError):
    """Raised when adding a habit whose name is already tracked this week."""

    def __init__(self, name: str):
        super().__init__(f"Habit '{name}' already exists")
        self.name = name


class UnknownColorError(ValueError):
    def __init__(self, value):
        super().__init__(f"Unknown color: {value!r}")
        self.value = value


class IndexOutOfRange(IndexError):
    """Raised for a habit index outside the grid (a cursor derivation defect)."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Habit index {index} out of range for {size} habits")
        self.index = index
        self.size = size


class WeekStoreError(OSError):
    """Raised when a week record cannot be read, parsed or written."""

    def __init__(self, message: str, path=None):
        super().__init__(message if path is None else f"{message}: {path}")
        self.path = path
