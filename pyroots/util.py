"""
Small, general purpose utility functions.
"""
from __future__ import annotations


# == I/O Functions ==========================================================

class Indenter:
    """
    Indenter is used to print information from multi-level nested
    functions.  Depending on level / nesting depth the output message is
    indented or suppressed.  Unlike a counter of live objects, the depth
    is carried by each `Indenter` itself so that separate threads can
    print without interfering with each other.

    Examples
    --------
    First define an 'inner' working function:
    >>> def inner_func(indent: Indenter):
    ...     # ... does some other things ...
    ...     indent("In inner_func()...")

    Finally define a top-level function definition that calls the 'inner'
    function:
    >>> def top_level(display: int | bool = False):
    ...     indent = Indenter(display)  # Output for this level.
    ...     # Does some things.
    ...     indent("In top_level()...")
    ...     inner_func(indent.nested())

    Running `top_level` with default arguments (equivalent to
    ``display=False`` or ``display=0``) produces no output:
    >>> top_level()

    Running `top_level` with ``display=True`` (equivalent to ``display=1``):
    >>> top_level(display=True)
    In top_level()...

    Running `top_level` with ``display=2`` produces indented output:
    >>> top_level(display=2) # doctest: +NORMALIZE_WHITESPACE
    In top_level()...
        In inner_func()...
    """

    def __init__(self, level: bool | int = 0, depth: int = 0):
        """
        Parameters
        ----------
        level : int | bool, optional
            The display level of the function where the `Indenter` is used.

            - `int`:  Values > 0 mean information will be printed.
               Nested levels are given the next lower level (level - 1,
               see `next_level` property).
            - `bool`: Converted to `int`, `True` = 1 and `False` = 0.

        depth : int, default = 0
            Number of tabs placed ahead of each printed line.
        """
        self._level = int(level)
        self._depth = depth

    def __call__(self, *args, **kwargs):
        """
        Print information, indented using tabs when required.  All
        arguments are passed directly to the underlying Python ``print``
        function.
        """
        if self._level > 0:
            # Separate print for tabs to avoid extraneous whitespace caused
            # by empty string.
            if self._depth > 0:
                print('\t' * self._depth, end='')

            print(*args, **kwargs)

    # -- Public Methods ---------------------------------------------------

    @property
    def active(self) -> bool:
        """True if calling this object will print anything."""
        return self._level > 0

    @property
    def next_level(self) -> int:
        """Shorthand property returning level - 1 (see `__init__`)."""
        return self._level - 1

    def nested(self) -> Indenter:
        """Returns an `Indenter` for the next nested function level."""
        return Indenter(self.next_level, self._depth + 1)
