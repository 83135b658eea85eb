# -*- encoding: utf-8 -*-
#
# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software. THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT
# LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT
# SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

from raycaster.geometry import Tuple
from raycaster.misc import are_close, EPSILON


class SingularMatrixError(Exception):
    """Raised when the inverse of a non-invertible matrix is requested"""

    def __init__(self, error_message):
        super().__init__(error_message)


def _matr_prod(a, b):
    size = len(a)
    result = [[0.0 for i in range(size)] for j in range(size)]
    for i in range(size):
        for j in range(size):
            for k in range(size):
                result[i][j] += a[i][k] * b[k][j]

    return result


def _are_matr_close(m1, m2, epsilon=EPSILON):
    for row1, row2 in zip(m1, m2):
        for a, b in zip(row1, row2):
            if not are_close(a, b, epsilon=epsilon):
                return False

    return True


def _diff_of_products(a: float, b: float, c: float, d: float):
    # On systems supporting the FMA instruction you might want to implement this
    # using the trick explained in https://pharr.org/matt/blog/2019/11/03/difference-of-floats.html
    return a * b - c * d


class Matrix:
    """A square matrix of size 2×2, 3×3, or 4×4

    The coefficients are stored row by row in the member `m`, a list of lists. Matrices of size 4×4 encode
    affine transformations: multiplying one by a :class:`.Tuple` transforms a point or a vector. When two
    transformations are composed, ``A * B`` applies ``B`` first.
    """

    SIZES = (2, 3, 4)

    def __init__(self, m=None):
        """Create a matrix from a list of rows. If `m` is ``None``, create the 4×4 identity matrix."""
        if m is None:
            m = identity_rows(4)

        size = len(m)
        if size not in Matrix.SIZES or any(len(row) != size for row in m):
            raise ValueError(f"a matrix must be square with size 2, 3, or 4, got {m}")

        self.m = [[float(x) for x in row] for row in m]

    @property
    def size(self):
        return len(self.m)

    def __getitem__(self, item):
        """Return the row with index `item`, so that ``matrix[row][col]`` works"""
        return self.m[item]

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and self.is_close(other)

    def __mul__(self, other):
        if isinstance(other, Tuple):
            if self.size != 4:
                raise ValueError(f"a {self.size}×{self.size} matrix cannot transform a tuple")

            row0, row1, row2, row3 = self.m
            return Tuple(
                x=other.x * row0[0] + other.y * row0[1] + other.z * row0[2] + other.w * row0[3],
                y=other.x * row1[0] + other.y * row1[1] + other.z * row1[2] + other.w * row1[3],
                z=other.x * row2[0] + other.y * row2[1] + other.z * row2[2] + other.w * row2[3],
                w=other.x * row3[0] + other.y * row3[1] + other.z * row3[2] + other.w * row3[3],
            )
        elif isinstance(other, Matrix):
            if self.size != other.size:
                raise ValueError(f"cannot multiply a {self.size}×{self.size} matrix "
                                 f"with a {other.size}×{other.size} one")
            return Matrix(_matr_prod(self.m, other.m))
        else:
            raise TypeError(f"Invalid type {type(other)} multiplied to a Matrix object")

    def __repr__(self):
        fmtstring = "   [" + " ".join(["{:6.3e}"] * self.size) + "],\n"
        result = "[\n"
        for row in self.m:
            result += fmtstring.format(*row)
        result += "]"
        return result

    def is_close(self, other, epsilon=EPSILON):
        """Check if `other` has the same coefficients, within `epsilon`"""
        return self.size == other.size and _are_matr_close(self.m, other.m, epsilon=epsilon)

    def transpose(self):
        """Return a new matrix whose rows are the columns of this one"""
        return Matrix([list(col) for col in zip(*self.m)])

    def submatrix(self, row: int, col: int):
        """Return the matrix obtained by removing one row and one column

        The result has size one less than this matrix; a 2×2 matrix has no submatrix."""
        if self.size == 2:
            raise ValueError("a 2×2 matrix has no submatrix")

        return Matrix([
            [x for j, x in enumerate(cur_row) if j != col]
            for i, cur_row in enumerate(self.m) if i != row
        ])

    def minor(self, row: int, col: int):
        """Return the determinant of the submatrix at (`row`, `col`)"""
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int):
        """Return the minor at (`row`, `col`), with its sign flipped if ``row + col`` is odd"""
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 == 1 else minor

    def determinant(self):
        """Compute the determinant through a cofactor expansion along the first row"""
        if self.size == 2:
            (a, b), (c, d) = self.m
            return _diff_of_products(a, d, b, c)

        return sum(self.m[0][col] * self.cofactor(0, col) for col in range(self.size))

    def is_invertible(self):
        return not are_close(self.determinant(), 0.0)

    def inverse(self):
        """Return the inverse matrix, computed as the adjugate divided by the determinant

        Raise :class:`.SingularMatrixError` if the determinant is zero."""
        det = self.determinant()
        if are_close(det, 0.0):
            raise SingularMatrixError(f"matrix {self} is not invertible (determinant is {det})")

        size = self.size
        result = [[0.0 for i in range(size)] for j in range(size)]
        for row in range(size):
            for col in range(size):
                # Swapping the indexes transposes the cofactor matrix
                result[col][row] = self.cofactor(row, col) / det

        return Matrix(result)


def identity_rows(size: int):
    return [[1.0 if i == j else 0.0 for j in range(size)] for i in range(size)]


def identity(size: int = 4):
    """Return the identity matrix with the given size"""
    return Matrix(identity_rows(size))
