# src/featuredemo/multiples.py
"""
Integer multiple checks.
"""


def is_multiple(value: int, of: int) -> bool:
    """Return True if ``value`` is an exact multiple of ``of``.

    Zero is only a multiple of zero, so ``is_multiple(n, 0)`` is True for
    ``n == 0`` and False otherwise instead of raising ZeroDivisionError.
    """
    if of == 0:
        return value == 0
    return value % of == 0
