"""Utility functions for capacity arithmetic and code checks."""

from .core.pattern import WILDCARD


def capacity_of(cardinality: int, wildcards: int) -> int:
    """Number of distinct fillings of ``wildcards`` positions from ``cardinality`` symbols."""
    return cardinality**wildcards


def fits(cardinality: int, wildcards: int, count: int) -> bool:
    """Check whether ``count`` unique codes fit, without building huge powers."""
    if count <= 0:
        return True
    if wildcards == 0:
        return count <= 1
    if cardinality <= 1:
        return cardinality >= count
    # cardinality >= 2, so capacity >= 2**wildcards > count
    if wildcards >= count.bit_length():
        return True
    return capacity_of(cardinality, wildcards) >= count


def describe_capacity(cardinality: int, wildcards: int) -> str:
    """Printable capacity; very large powers are shown symbolically."""
    if cardinality <= 1 or wildcards <= 256:
        return str(capacity_of(cardinality, wildcards))
    return f"{cardinality}^{wildcards}"


def matches_template(code: str, template: str, pool: str) -> bool:
    """Check that literals sit in place and wildcards were filled from the pool."""
    if len(code) != len(template):
        return False
    for char, slot in zip(code, template):
        if slot == WILDCARD:
            if char not in pool:
                return False
        elif char != slot:
            return False
    return True
