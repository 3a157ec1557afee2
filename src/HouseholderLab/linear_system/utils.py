from dataclasses import dataclass
from numpy.typing import NDArray


@dataclass
class LinearSystem:
    """ `matrix @ solution = rhs`; `solution` is filled in by the first
    solver when it is not known up front. """
    matrix: NDArray
    rhs: NDArray
    solution: NDArray | None = None

    @property
    def size(self) -> int:
        return self.matrix.shape[0]
