from typing import Iterator, List, Tuple


class SubsetEnumerator:
    """
    Enumerates all sorted subsets of a fixed size of range(begin, end), in
    lexicographic order.

    advance() reports the position of the first element that changed, so
    callers keeping per-element state (e.g. matrix rows) only need to
    refresh the suffix starting there.
    """

    def __init__(self, size: int, begin: int, end: int):
        if size < 0:
            raise ValueError("Subset size must be >= 0")
        self.size = size
        self.begin = begin
        self.end = end
        self._ids: List[int] = []
        self._valid = False
        self.reset()

    def reset(self) -> None:
        self._ids = list(range(self.begin, self.begin + self.size))
        self._valid = self.size <= self.end - self.begin

    def is_valid(self) -> bool:
        return self._valid

    @property
    def current(self) -> Tuple[int, ...]:
        return tuple(self._ids)

    def __getitem__(self, i: int) -> int:
        return self._ids[i]

    def __len__(self) -> int:
        return self.size

    def advance(self) -> int:
        ids = self._ids
        i = self.size - 1
        # Highest value position i may hold is end - (size - i).
        while i >= 0 and ids[i] == self.end - self.size + i:
            i -= 1
        if i < 0:
            self._valid = False
            return 0
        ids[i] += 1
        for j in range(i + 1, self.size):
            ids[j] = ids[j - 1] + 1
        return i

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        while self._valid:
            yield self.current
            self.advance()
