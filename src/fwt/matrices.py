import numpy as np

from .bits import sequency_permutation
from .butterfly import log2_length


def hadamard_matrix(n: int) -> np.ndarray:
	"""Generate Sylvester-type Hadamard matrix of order n (n must be power of two).

	Entries are +1 and -1, dtype float64. Rows are in Hadamard (natural) order.
	"""
	log2_length(n)
	H = np.array([[1.0]])
	while H.shape[0] < n:
		H = np.block([[H, H], [H, -H]])
	return H


def walsh_matrix(n: int) -> np.ndarray:
	"""Hadamard matrix with its rows in sequency order.

	Row p changes sign exactly p times.
	"""
	return hadamard_matrix(n)[sequency_permutation(n)]
