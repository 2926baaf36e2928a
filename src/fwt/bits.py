import numpy as np

from .butterfly import log2_length


def bit_reverse(i: int, k: int) -> int:
	"""Reverse the lowest k bits of i."""
	r = 0
	for _ in range(k):
		r = (r << 1) | (i & 1)
		i >>= 1
	return r


def gray_code(i: int) -> int:
	return i ^ (i >> 1)


def gray_decode(g: int) -> int:
	"""Inverse of gray_code: prefix XOR of the bits of g from the top down."""
	i = g
	shift = g >> 1
	while shift:
		i ^= shift
		shift >>= 1
	return i


def sequency_to_hadamard(p: int, k: int) -> int:
	"""Hadamard-order index of the Walsh function with sequency p, for n = 2**k.

	Gray-code p, then reverse its k bits.
	"""
	return bit_reverse(gray_code(p), k)


def hadamard_to_sequency(h: int, k: int) -> int:
	"""Sequency (number of sign changes) of Hadamard row h, for n = 2**k."""
	return gray_decode(bit_reverse(h, k))


def sequency_permutation(n: int) -> np.ndarray:
	"""Index table perm with perm[p] = sequency_to_hadamard(p, log2(n)).

	Gathering a Hadamard-ordered array with it, out = y[..., perm], yields
	sequency order. Built fresh on every call.
	"""
	k = log2_length(n)
	idx = np.arange(n, dtype=np.int64)
	gray = idx ^ (idx >> 1)
	perm = np.zeros(n, dtype=np.int64)
	for b in range(k):
		perm |= ((gray >> b) & 1) << (k - 1 - b)
	return perm
