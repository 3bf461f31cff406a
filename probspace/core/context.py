"""Context manager configuring the floating-point tolerance."""

from typing import Optional

DEFAULT_EPSILON = 1e-5


class Tolerance:
    """Context manager overriding the tolerance used for probability equality.

    Sums of probabilities are not exact, so every mass comparison in
    probspace is made within an epsilon.  Outside any context the epsilon
    is :data:`DEFAULT_EPSILON`; contexts nest and restore their parent on
    exit.

    Example:
        >>> with Tolerance(1e-9):
        ...     equiv(0.1 + 0.2, 0.3)
        True
    """

    _active_context: Optional['Tolerance'] = None

    def __init__(self, epsilon: float):
        """Initialize a new Tolerance context.

        Args:
            epsilon: Strictly positive comparison tolerance.

        Raises:
            ValueError: If *epsilon* is not positive.
        """
        if not epsilon > 0:
            raise ValueError(f"epsilon must be positive, got {epsilon}")
        self.epsilon = float(epsilon)
        self._parent_context: Optional['Tolerance'] = None

    def __enter__(self) -> 'Tolerance':
        """Enter the Tolerance context.

        Returns:
            The Tolerance context manager instance.
        """
        self._parent_context = Tolerance._active_context
        Tolerance._active_context = self
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """Exit the Tolerance context.

        Returns:
            False to propagate any exceptions.
        """
        Tolerance._active_context = self._parent_context
        return False

    @classmethod
    def get_active_context(cls) -> Optional['Tolerance']:
        """Get the currently active Tolerance context, or None."""
        return cls._active_context

    @classmethod
    def current_epsilon(cls) -> float:
        """Epsilon of the active context, or the default outside any context."""
        if cls._active_context is None:
            return DEFAULT_EPSILON
        return cls._active_context.epsilon

    def __repr__(self) -> str:
        return f"Tolerance(epsilon={self.epsilon})"
