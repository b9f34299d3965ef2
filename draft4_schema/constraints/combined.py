"""
Combined constraint implementation.
"""

from .logical import AllOfConstraint


class CombinedConstraint(AllOfConstraint):
    """
    Constraint that combines the keyword rules of one schema object.

    This is what a schema compiles to: the conjunction of one rule per
    recognised keyword, in keyword evaluation order. It evaluates exactly
    like an ``allOf``; the separate class keeps compiled trees readable.
    """

    def __str__(self) -> str:
        """String representation of the constraint."""
        return f"CombinedConstraint(constraints={len(self.constraints)})"
