from math import comb
import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#tr.set_default_dtype(tr.float64)
#backends.append(api.array_namespace(tr.zeros(1)))

class HilbertMatrix:
    """Matrix-free Hilbert matrix with entries 1/(i+j+1)."""

    def __init__(self, xp, n: int) -> None:
        self.xp = xp
        self.n = n

    @property
    def row_dimension(self) -> int:
        return self.n

    @property
    def column_dimension(self) -> int:
        return self.n

    def apply(self, x):
        y = self.xp.zeros(self.n, dtype=self.xp.float64)
        for i in range(self.n):
            val = 0.0
            for j in range(self.n):
                val += float(x[j]) / (i + j + 1.0)
            y[i] = val
        return y

def inverse_hilbert(xp, n: int):
    """Exact inverse of the n x n Hilbert matrix."""
    data = xp.zeros((n, n), dtype=xp.float64)
    for i in range(n):
        for j in range(n):
            val = (i + j + 1) * comb(n + i, n - j - 1) * comb(n + j, n - i - 1) * comb(i + j, i)**2
            data[i, j] = -val if (i + j) % 2 == 1 else val
    return data

def unit_vector(xp, n: int, j: int):
    vec = xp.zeros(n, dtype=xp.float64)
    vec[j] = 1.0
    return vec

def rand_data(xp, *shape: int):
    data = np.random.rand(*shape)
    if api.is_torch_namespace(xp):
        return xp.asarray(data)
    else:
        return data
