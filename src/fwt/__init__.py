from .butterfly import InvalidLength, power_of_2
from .bits import sequency_permutation
from .transforms import hadamard, sequency, hadamard_inplace, sequency_inplace, scale
from .matrices import hadamard_matrix, walsh_matrix

__all__ = [
	"InvalidLength",
	"power_of_2",
	"sequency_permutation",
	"hadamard",
	"sequency",
	"hadamard_inplace",
	"sequency_inplace",
	"scale",
	"hadamard_matrix",
	"walsh_matrix",
]
