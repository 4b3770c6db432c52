"""Fixed-size column-major matrices with writable column views."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence


def _check_index(index: int, size: int) -> int:
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(f"index must be an int, not {type(index).__name__}")
    if not 0 <= index < size:
        raise IndexError("index out of bounds")
    return index


class ColView:
    """A writable window onto one column of a matrix's storage.

    Writes through the view change the underlying matrix.
    """

    __slots__ = ("_data", "_start", "_rows")

    def __init__(self, data: MutableSequence[float], start: int, rows: int) -> None:
        if rows <= 0:
            raise ValueError("a column view must cover at least one row")
        if start < 0 or start + rows > len(data):
            raise IndexError("view out of bounds")
        self._data = data
        self._start = start
        self._rows = rows

    def __getitem__(self, index: int) -> float:
        return self._data[self._start + _check_index(index, self._rows)]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[self._start + _check_index(index, self._rows)] = value

    def assign(self, values: Iterable[float]) -> ColView:
        """Copy exactly ``len(self)`` values into the column."""
        items = list(values)
        if len(items) != self._rows:
            raise ValueError(
                f"expected {self._rows} values for the column, got {len(items)}"
            )
        self._data[self._start : self._start + self._rows] = items
        return self

    def __len__(self) -> int:
        return self._rows

    def __iter__(self) -> Iterator[float]:
        return iter(self._data[self._start : self._start + self._rows])

    def __repr__(self) -> str:
        return f"ColView({list(self)!r})"


class Matrix:
    """A ``rows`` x ``cols`` matrix stored column by column."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self, rows: int, cols: int, values: Iterable[float] | None = None
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("Matrix must have at least one row and one column")
        self._rows = rows
        self._cols = cols
        size = rows * cols
        if values is None:
            self._data: list[float] = [0.0] * size
        else:
            items = list(values)
            if len(items) != size:
                raise ValueError(
                    f"Number of values ({len(items)}) must match the size "
                    f"of the matrix ({size})"
                )
            self._data = items

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    def col(self, index: int) -> ColView:
        """Return a writable view of column ``index``."""
        _check_index(index, self._cols)
        return ColView(self._data, index * self._rows, self._rows)

    def __getitem__(self, index: int) -> float:
        return self._data[_check_index(index, len(self._data))]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[_check_index(index, len(self._data))] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(list(self._data))

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError(f"cannot add matrices of shape {self.shape} and {other.shape}")
        return Matrix(
            self._rows, self._cols, (a + b for a, b in zip(self._data, other._data))
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._cols}, {self._data!r})"


def view_to_vector(col: ColView) -> Matrix:
    """Copy a column view into a new ``len(col)`` x 1 matrix."""
    return Matrix(len(col), 1, list(col))