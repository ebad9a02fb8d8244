"""Filter for emails whose problem is already stored."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DuplicateFilter:
    """Decides whether a problem number was already imported.

    `threshold` is the highest number stored when the run started. It does not
    move while the run inserts new problems.
    """

    threshold: int

    def is_duplicate(self, number: int | None) -> bool:
        # Subjects without digits cannot be told apart from already seen problems
        if number is None:
            return True
        return number <= self.threshold
