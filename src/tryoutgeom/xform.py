## matrix transformation operations for 3D homogeneous coordinates
## in tryoutgeom

## Copyright (c) 2024 tryoutgeom contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

from tryoutgeom.geom import epsilon, isgoodnum
from tryoutgeom.quaternion import Quaternion

## a matrix is represented as a list of four four-vectors. In a
## matrix, vectors represent rows unless the transpose property is
## true.  Vectors are plain lists or tuples of four numbers, and we
## assume that Mx implies a column vector: translations live in the
## last column and the perspective divisor in the bottom row.

## Inverses of the constructors below are determined analytically
## (see the inverse= keyword) rather than numerically.


def isvect(x):
    return isinstance(x, (tuple, list)) and len(x) == 4 and \
        all(isgoodnum(e) for e in x)


def dot4(a, b):
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2] + a[3]*b[3]


class Matrix:
    """4x4 transformation matrix class for transforming homogeneous 3D coordinates"""

    def __init__(self, a=False, trans=False):
        self.m = [[1, 0, 0, 0],
                  [0, 1, 0, 0],
                  [0, 0, 1, 0],
                  [0, 0, 0, 1]]
        self.trans = False

        if isinstance(a, Matrix):
            for i in range(4):
                self.setrow(i, list(a.getrow(i)))

        elif isinstance(a, (tuple, list)):
            if len(a) == 4:
                if not all(isinstance(r, (tuple, list)) and len(r) == 4 for r in a):
                    raise ValueError('bad rows in matrix initialization: {}'.format(a))
                for i in range(4):
                    for j in range(4):
                        x = a[i][j]
                        if isgoodnum(x):
                            self.m[i][j] = x
                        else:
                            raise ValueError('bad element in matrix initialization: {}'.format(x))
            elif len(a) == 16:
                for i in range(4):
                    for j in range(4):
                        x = a[i*4+j]
                        if isgoodnum(x):
                            self.m[i][j] = x
                        else:
                            raise ValueError('bad element in matrix initialization: {}'.format(x))
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        elif a is not False:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        self.trans = trans

    def __repr__(self):
        return "Matrix({},{},{},{},{})".format(self.m[0], self.m[1],
                                               self.m[2], self.m[3], self.trans)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.rows() == other.rows()

    __hash__ = None

    # return value indexed by i,j
    def get(self, i, j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        if self.trans:
            return self.m[j][i]
        else:
            return self.m[i][j]

    # set value indexed by i,j
    def set(self, i, j, x):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to set: {},{}'.format(i, j))
        if isgoodnum(x):
            if self.trans:
                self.m[j][i] = x
            else:
                self.m[i][j] = x
        else:
            raise ValueError('bad value passed to set: {}'.format(x))

    def getrow(self, i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        if self.trans:
            return [self.m[0][i],
                    self.m[1][i],
                    self.m[2][i],
                    self.m[3][i]]
        else:
            return list(self.m[i])

    def getcol(self, j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        if not self.trans:
            return [self.m[0][j],
                    self.m[1][j],
                    self.m[2][j],
                    self.m[3][j]]
        else:
            return list(self.m[j])

    def setrow(self, i, x):
        if not isvect(x):
            raise ValueError('bad non-vector passed to setrow: {}'.format(x))
        if i < 0 or i > 3:
            raise ValueError('bad row index passed to setrow: {}'.format(i))
        if self.trans:
            for k in range(4):
                self.m[k][i] = x[k]
        else:
            self.m[i] = list(x)

    def setcol(self, j, x):
        if not isvect(x):
            raise ValueError('bad non-vector passed to setcol: {}'.format(x))
        if j < 0 or j > 3:
            raise ValueError('bad column index passed to setcol: {}'.format(j))
        if not self.trans:
            for k in range(4):
                self.m[k][j] = x[k]
        else:
            self.m[j] = list(x)

    # rows as a tuple of tuples, respecting the transpose flag
    def rows(self):
        return tuple(tuple(self.getrow(i)) for i in range(4))

    def transpose(self):
        return Matrix(self, True)

    def isclose(self, other, tol=epsilon):
        for i in range(4):
            for j in range(4):
                if abs(self.get(i, j) - other.get(i, j)) > tol:
                    return False
        return True

    def isidentity(self, tol=epsilon):
        return self.isclose(Identity(), tol)

    # matrix multiply.  If x is a matrix, compute MX.  If X is a
    # vector, compute Mx. If x is a scalar, compute xM. Respects
    # transpose flag.

    def mul(self, x):
        if isinstance(x, Matrix):
            result = Matrix()
            for i in range(4):
                for j in range(4):
                    result.set(i, j, dot4(self.getrow(i), x.getcol(j)))
            return result
        elif isvect(x):
            return [dot4(self.getrow(i), x) for i in range(4)]
        elif isgoodnum(x):
            result = Matrix()
            for i in range(4):
                result.setrow(i, [e * x for e in self.getrow(i)])
            return result

        raise ValueError('bad thing passed to mul(): {}'.format(x))

    # apply to a 3D point, dividing through by w
    def project(self, p):
        v = self.mul([p[0], p[1], p[2] if len(p) > 2 else 0.0, 1.0])
        if abs(v[3]) < 1e-12:
            raise ValueError('point projects to infinity: {}'.format(p))
        return v[0]/v[3], v[1]/v[3], v[2]/v[3]


def Identity():
    return Matrix()


# return the 4x4 rotation matrix for a quaternion, normalizing it first
def Rotation(q, inverse=False):
    if not isinstance(q, Quaternion):
        q = Quaternion(*q)
    q = q.normalized()
    if inverse:
        q = q.conjugate()

    x, y, z, w = q
    R = [[1 - 2*(y*y + z*z), 2*(x*y - z*w), 2*(x*z + y*w), 0],
         [2*(x*y + z*w), 1 - 2*(x*x + z*z), 2*(y*z - x*w), 0],
         [2*(x*z - y*w), 2*(y*z + x*w), 1 - 2*(x*x + y*y), 0],
         [0, 0, 0, 1]]

    return Matrix(R)


# arbitrary axis rotation, angle in radians
def AxisRotation(axis, angle, inverse=False):
    return Rotation(Quaternion.from_axis_angle(axis, angle), inverse)


def Translation(delta, inverse=False):
    dx = delta[0]
    dy = delta[1]
    dz = delta[2]
    if inverse:
        dx, dy, dz = -dx, -dy, -dz
    T = [[1, 0, 0, dx],
         [0, 1, 0, dy],
         [0, 0, 1, dz],
         [0, 0, 0, 1]]
    return Matrix(T)


def Scale(x, y=None, z=None, inverse=False):
    if isgoodnum(x):
        sx = x
        if isgoodnum(y) and isgoodnum(z):
            sy = y
            sz = z
        else:
            sy = sz = x
    elif isinstance(x, (tuple, list)) and len(x) >= 3:
        sx = x[0]
        sy = x[1]
        sz = x[2]
    else:
        raise ValueError('bad scaling values passed to Scale')

    if inverse:
        sx = 1.0/sx
        sy = 1.0/sy
        sz = 1.0/sz

    S = [[sx, 0, 0, 0],
         [0, sy, 0, 0],
         [0, 0, sz, 0],
         [0, 0, 0, 1.0]]
    return Matrix(S)


# perspective divisor embedded in the bottom row
def Perspective(delta):
    P = [[1, 0, 0, 0],
         [0, 1, 0, 0],
         [0, 0, 1, 0],
         [delta[0], delta[1], delta[2], 1]]
    return Matrix(P)


# row-vector (m11 ... m44) layout used by 2D projection pipelines
def projection_rows(matrix):
    return matrix.transpose().rows()
