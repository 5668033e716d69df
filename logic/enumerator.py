# logic/enumerator.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Enumeration of all binary assignments to a set of atomics

"""Assignment enumeration.

Assignments are produced by recursive binary choice: append 0 and recurse,
then append 1 and recurse. The first atomic therefore varies slowest and
the vectors come out in ascending order when read as big-endian numbers.
"""

from typing import Dict, Iterator, List, Sequence, Tuple


class AssignmentEnumerator:
    """Restartable sequence of all 2^n assignments to the given atomics.

    Every call to ``__iter__`` starts a fresh enumeration.

    Attributes:
        atomics: Atomic names in bit order (first name is the most significant bit)
    """

    def __init__(self, atomics: Sequence[str]):
        self.atomics: List[str] = list(atomics)

    def __len__(self) -> int:
        return 2 ** len(self.atomics)

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        return self._permutations(())

    def _permutations(self, values: Tuple[int, ...]) -> Iterator[Tuple[int, ...]]:
        if len(values) < len(self.atomics):
            yield from self._permutations(values + (0,))
            yield from self._permutations(values + (1,))
        else:
            yield values

    def bindings(self) -> Iterator[Dict[str, int]]:
        """Yield each assignment as an atomic-name to bit mapping."""
        for values in self:
            yield dict(zip(self.atomics, values))
