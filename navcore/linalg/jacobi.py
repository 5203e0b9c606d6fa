# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""
Jacobi Eigen Solver for Real Symmetric Matrices
===============================================

Classical Jacobi method: at every step the largest off-diagonal element
a[p, q] is located by a full scan and annihilated by a plane (Givens)
rotation applied to rows/columns p and q. The same rotations accumulated
into an identity matrix give the eigenvectors as columns.

The matrix is diagonalized in place; on return its diagonal holds the
eigenvalues. If the iteration cap is reached first, the buffers are left
in their last-iterated state and the failure is reported in the result.

References:
    [1] C.G.J. Jacobi, Ueber ein leichtes Verfahren die in der Theorie der
        Saecularstoerungen vorkommenden Gleichungen numerisch aufzuloesen,
        Crelle's Journal, 1846
    [2] G.H. Golub, C.F. Van Loan, Matrix Computations, 4th ed., 2013, 8.5
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from numba import njit

from ..core.params import JACOBI_EPS, JACOBI_MAX_SWEEPS

logger = logging.getLogger(__name__)

# Legacy return codes
EIG_CONVERGED = 1
EIG_NOT_CONVERGED = -1


@njit(cache=True)
def _jacobi_kernel(a, v, eps, max_sweeps):
    """Diagonalize a in place, accumulate rotations in v.

    Returns (status, rotations applied). Intermediate values are double
    precision whatever the storage width of a and v.
    """
    n = a.shape[0]

    for i in range(n):
        for j in range(n):
            v[i, j] = 1.0 if i == j else 0.0

    count = 1
    p = 0
    q = 0
    while True:
        fm = 0.0
        for i in range(n):
            for j in range(n):
                d = abs(a[i, j])
                if i != j and d > fm:
                    fm = d
                    p = i
                    q = j

        if fm < eps:
            return EIG_CONVERGED, count - 1
        if count > max_sweeps:
            return EIG_NOT_CONVERGED, count - 1
        count += 1

        # omega = sin(2 theta) of the annihilating rotation
        x = -a[p, q]
        y = (a[q, q] - a[p, p]) / 2.0
        omega = x / np.sqrt(x * x + y * y)
        if y < 0.0:
            omega = -omega
        sn = 1.0 + np.sqrt(1.0 - omega * omega)
        sn = omega / np.sqrt(2.0 * sn)
        cn = np.sqrt(1.0 - sn * sn)

        fm = a[p, p]
        a[p, p] = fm * cn * cn + a[q, q] * sn * sn + a[p, q] * omega
        a[q, q] = fm * sn * sn + a[q, q] * cn * cn - a[p, q] * omega
        a[p, q] = 0.0
        a[q, p] = 0.0

        for j in range(n):
            if j != p and j != q:
                fm = a[p, j]
                a[p, j] = fm * cn + a[q, j] * sn
                a[q, j] = -fm * sn + a[q, j] * cn

        for i in range(n):
            if i != p and i != q:
                fm = a[i, p]
                a[i, p] = fm * cn + a[i, q] * sn
                a[i, q] = -fm * sn + a[i, q] * cn

        for i in range(n):
            fm = v[i, p]
            v[i, p] = fm * cn + v[i, q] * sn
            v[i, q] = -fm * sn + v[i, q] * cn


@dataclass
class JacobiResult:
    """Outcome of a Jacobi eigen decomposition"""
    converged: bool
    iterations: int           # Givens rotations applied
    matrix: np.ndarray        # (near-)diagonal matrix, eigenvalues on the diagonal
    eigenvectors: np.ndarray  # eigenvectors as columns

    @property
    def status(self) -> int:
        """1 on convergence, -1 when the iteration cap was hit"""
        return EIG_CONVERGED if self.converged else EIG_NOT_CONVERGED

    @property
    def eigenvalues(self) -> np.ndarray:
        return np.diag(self.matrix).copy()

    def sorted_eigenpairs(self) -> Tuple[np.ndarray, np.ndarray]:
        """Eigenvalues in ascending order with matching eigenvector columns"""
        order = np.argsort(np.diag(self.matrix), kind='stable')
        return np.diag(self.matrix)[order], self.eigenvectors[:, order]


def _as_work_array(arr: np.ndarray, name: str) -> np.ndarray:
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError(f"{name} must be a square 2-D matrix, got shape {arr.shape}")
    if arr.dtype not in (np.float32, np.float64):
        raise ValueError(f"{name} must be float32 or float64, got {arr.dtype}")
    if not (arr.flags.c_contiguous and arr.flags.writeable):
        raise ValueError(f"{name} must be a writable C-contiguous (row-major) array")
    return arr


def jacobi_eig(a: np.ndarray,
               v: Optional[np.ndarray] = None,
               eps: float = JACOBI_EPS,
               max_sweeps: int = JACOBI_MAX_SWEEPS,
               overwrite_a: bool = True) -> JacobiResult:
    """
    Eigenvalues and eigenvectors of a real symmetric matrix

    Parameters
    ----------
    a : np.ndarray
        Symmetric matrix (n, n), row-major. Diagonalized in place when it is
        a writable C-contiguous float32/float64 array and ``overwrite_a`` is
        True; otherwise a float64 copy is used.
    v : np.ndarray, optional
        Output buffer (n, n) for the eigenvectors. Allocated when omitted.
    eps : float, optional
        Convergence threshold on the largest off-diagonal magnitude
    max_sweeps : int, optional
        Maximum number of rotations before reporting non-convergence
    overwrite_a : bool, optional
        Allow the input matrix to be modified (default: True)

    Returns
    -------
    JacobiResult
        ``converged``, rotation count, the diagonalized matrix and the
        eigenvector matrix. On non-convergence the buffers hold the state
        after the last rotation.

    Raises
    ------
    ValueError
        If the matrix is not square, a supplied ``v`` does not match it,
        ``eps`` is not positive or ``max_sweeps`` is negative

    Notes
    -----
    Symmetry is assumed, not checked; only the largest off-diagonal element
    drives each rotation.

    Examples
    --------
    >>> import numpy as np
    >>> A = np.array([[2.0, 1.0], [1.0, 2.0]])
    >>> res = jacobi_eig(A)
    >>> res.converged, np.allclose(np.sort(res.eigenvalues), [1.0, 3.0])
    (True, True)
    """
    if eps <= 0.0:
        raise ValueError(f"Convergence threshold must be positive, got {eps}")
    if max_sweeps < 0:
        raise ValueError(f"Iteration cap must be non-negative, got {max_sweeps}")

    arr = np.asarray(a)
    if overwrite_a and isinstance(a, np.ndarray) and arr.dtype in (np.float32, np.float64) \
            and arr.flags.c_contiguous and arr.flags.writeable:
        work = arr
    else:
        work = np.array(arr, dtype=np.float64, order='C')
    work = _as_work_array(work, "a")

    if v is None:
        v = np.empty_like(work)
    else:
        v = _as_work_array(np.asarray(v), "v")
        if v.shape != work.shape:
            raise ValueError(f"v shape {v.shape} does not match a shape {work.shape}")

    status, iterations = _jacobi_kernel(work, v, float(eps), int(max_sweeps))
    converged = status == EIG_CONVERGED

    if converged:
        logger.debug(f"Jacobi converged: n={work.shape[0]}, rotations={iterations}")
    else:
        off_diag = np.abs(work - np.diag(np.diag(work))).max()
        logger.warning(f"Jacobi did not converge within {max_sweeps} rotations "
                       f"(max off-diagonal {off_diag:.3e} >= {eps:.3e})")

    return JacobiResult(converged=converged, iterations=int(iterations),
                        matrix=work, eigenvectors=v)
