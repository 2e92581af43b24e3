"""Common state for feature stores."""

from typing import Optional


class FeatureStore:
    """
    Fetch-on-activate state holder.

    ``loading`` starts True and drops to False once the first fetch settles;
    ``error`` carries a user-facing message from the last failed fetch.
    """

    def __init__(self):
        self.loading: bool = True
        self.error: Optional[str] = None
        self._activated = False

    @property
    def activated(self) -> bool:
        return self._activated

    def activate(self) -> None:
        """Run the initial fetch once."""
        if self._activated:
            return
        self._activated = True
        self.refetch()

    def refetch(self) -> None:
        raise NotImplementedError
