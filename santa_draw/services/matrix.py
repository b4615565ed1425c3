from __future__ import annotations

from typing import Dict, Iterable, List


class UnknownParticipantError(LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Unknown person "{name}"')
        self.name = name


class EligibilityMatrix:
    """Square "may X give to Y" table over a fixed ordering of names.

    A fresh matrix allows every pair except giving to oneself. Cells are
    addressed by name; any name outside the matrix raises
    ``UnknownParticipantError``.
    """

    def __init__(self, keys: Iterable[str]) -> None:
        self._keys: List[str] = list(keys)
        self._indexes: Dict[str, int] = {}
        for index, key in enumerate(self._keys):
            if key in self._indexes:
                raise ValueError(f'Duplicate person "{key}"')
            self._indexes[key] = index

        size = len(self._keys)
        self._data: List[List[bool]] = [[True] * size for _ in range(size)]
        for index in range(size):
            self._data[index][index] = False

    def _index(self, name: str) -> int:
        try:
            return self._indexes[name]
        except KeyError:
            raise UnknownParticipantError(name) from None

    def get(self, giver: str, receiver: str) -> bool:
        return self._data[self._index(giver)][self._index(receiver)]

    def set(self, giver: str, receiver: str, value: bool) -> None:
        row, col = self._index(giver), self._index(receiver)
        if value and row == col:
            raise ValueError(f'"{giver}" cannot give a gift to themselves')
        self._data[row][col] = value

    def row(self, giver: str) -> List[bool]:
        return list(self._data[self._index(giver)])

    def eligible_receivers(self, giver: str) -> List[str]:
        row = self._data[self._index(giver)]
        return [self._keys[index] for index, allowed in enumerate(row) if allowed]

    def clear_column(self, receiver: str) -> None:
        """Mark ``receiver`` as taken for every giver."""
        col = self._index(receiver)
        for row in self._data:
            row[col] = False

    def key_at(self, index: int) -> str:
        return self._keys[index]

    def __contains__(self, name: object) -> bool:
        return name in self._indexes

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"<EligibilityMatrix(keys={self._keys})>"
