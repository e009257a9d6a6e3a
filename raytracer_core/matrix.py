#
# PROJECT: raytracer-core
# MODULE: raytracer_core/matrix.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Tuple4, float_eq


class SquareMatrix:
    """Fixed-size square matrix, [row][col] storage.

    Subclasses pin SIZE and name the type that submatrix() returns, so
    cofactor expansion recurses 4 -> 3 -> 2 down to the closed 2x2 case.
    Cells are read and written as m[row, col]; indices are not checked
    beyond what the underlying lists do.
    """
    __slots__ = ('m',)

    SIZE = 0
    SUBMATRIX_TYPE = None

    def __init__(self, data=None):
        n = self.SIZE
        if data is not None:
            self.m = [[float(v) for v in row] for row in data]
            if len(self.m) != n or any(len(row) != n for row in self.m):
                raise ValueError(f"{type(self).__name__} expects {n}x{n} values")
        else:
            self.m = [[0.0] * n for _ in range(n)]

    @classmethod
    def create_and_fill(cls, fill_value: float):
        return cls([[fill_value] * cls.SIZE for _ in range(cls.SIZE)])

    @classmethod
    def zeros(cls):
        return cls()

    @classmethod
    def identity(cls):
        res = cls()
        for i in range(cls.SIZE):
            res.m[i][i] = 1.0
        return res

    def __getitem__(self, index):
        row, col = index
        return self.m[row][col]

    def __setitem__(self, index, value):
        row, col = index
        self.m[row][col] = float(value)

    def __repr__(self):
        rows = ", ".join("[" + ", ".join(f"{v:g}" for v in row) + "]" for row in self.m)
        return f"{type(self).__name__}([{rows}])"

    def __eq__(self, other):
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        if other.SIZE != self.SIZE:
            return False
        n = self.SIZE
        return all(float_eq(self.m[r][c], other.m[r][c])
                   for r in range(n) for c in range(n))

    __hash__ = None

    def __matmul__(self, other):
        n = self.SIZE
        if isinstance(other, SquareMatrix) and other.SIZE == n:
            res = type(self)()
            for r in range(n):
                for c in range(n):
                    val = 0.0
                    for k in range(n):
                        val += self.m[r][k] * other.m[k][c]
                    res.m[r][c] = val
            return res
        return NotImplemented

    def transpose(self):
        n = self.SIZE
        res = type(self)()
        for r in range(n):
            for c in range(n):
                res.m[c][r] = self.m[r][c]
        return res

    def submatrix(self, row: int, col: int):
        """Drop one row and one column, keeping the rest in order."""
        if self.SUBMATRIX_TYPE is None:
            raise TypeError(f"{type(self).__name__} has no submatrix type")
        n = self.SIZE
        return self.SUBMATRIX_TYPE([
            [self.m[r][c] for c in range(n) if c != col]
            for r in range(n) if r != row
        ])

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        if (row + col) % 2 == 1:
            return -minor
        return minor

    def determinant(self) -> float:
        det = 0.0
        for c in range(self.SIZE):
            det += self.cofactor(0, c) * self.m[0][c]
        return det

    def is_invertible(self) -> bool:
        return not float_eq(self.determinant(), 0.0)

    def inverse(self):
        """Adjugate over determinant, or None for a singular matrix."""
        det = self.determinant()
        if float_eq(det, 0.0):
            return None
        n = self.SIZE
        res = type(self)()
        for r in range(n):
            for c in range(n):
                # Transposed assignment: the adjugate is the cofactor
                # matrix transposed.
                res.m[c][r] = self.cofactor(r, c) / det
        return res


class Matrix2(SquareMatrix):
    __slots__ = ()
    SIZE = 2

    def minor(self, row: int, col: int) -> float:
        return self.m[1 - row][1 - col]

    def determinant(self) -> float:
        return self.m[0][0] * self.m[1][1] - self.m[0][1] * self.m[1][0]


class Matrix3(SquareMatrix):
    __slots__ = ()
    SIZE = 3
    SUBMATRIX_TYPE = Matrix2


class Matrix4(SquareMatrix):
    __slots__ = ()
    SIZE = 4
    SUBMATRIX_TYPE = Matrix3

    def __matmul__(self, other):
        if isinstance(other, Tuple4):
            m = self.m
            return Tuple4(*(
                m[r][0] * other.x + m[r][1] * other.y
                + m[r][2] * other.z + m[r][3] * other.w
                for r in range(4)
            ))
        return super().__matmul__(other)
