import numpy as np

from .bits import sequency_permutation
from .butterfly import butterfly_inplace, log2_length


def _working_copy(x) -> np.ndarray:
	"""Copy x into a fresh array whose dtype survives repeated a+b, a-b."""
	a = np.array(x, copy=True)
	if a.ndim not in (1, 2):
		raise ValueError("Input must be 1D or 2D array")
	if a.dtype.kind in "bu" or (a.dtype.kind == "i" and a.dtype.itemsize < 8):
		a = a.astype(np.int64)
	elif a.dtype.kind not in "ifc":
		a = a.astype(np.float64)
	return a


def _check_inplace(a) -> None:
	if not isinstance(a, np.ndarray):
		raise TypeError("In-place transform needs a numpy array")
	if a.ndim not in (1, 2):
		raise ValueError("Input must be 1D or 2D array")
	if not a.flags.writeable:
		raise ValueError("In-place transform needs a writeable array")
	if a.dtype.kind not in "ifc":
		raise TypeError("In-place transform needs a signed integer, float or complex dtype")
	log2_length(a.shape[-1])


def hadamard(x) -> np.ndarray:
	"""Hadamard (natural) ordered Fast Walsh Transform.

	Returns a new array; x itself is never modified. Accepts 1D or 2D (batch
	as rows). Raises InvalidLength if the length is not a power of two.
	Integer and boolean inputs come back as int64; float and complex inputs
	keep their dtype.
	"""
	a = _working_copy(x)
	butterfly_inplace(a)
	return a


def sequency(x) -> np.ndarray:
	"""Sequency (Walsh) ordered Fast Walsh Transform.

	Output index p holds the coefficient of the Walsh function with p sign
	changes. Returns a new array; x itself is never modified.
	"""
	a = _working_copy(x)
	butterfly_inplace(a)
	return a[..., sequency_permutation(a.shape[-1])]


def hadamard_inplace(a: np.ndarray) -> np.ndarray:
	"""Hadamard ordered transform written into a, which is also returned.

	The dtype of a is kept, so sums of narrow integer types can wrap.
	"""
	_check_inplace(a)
	butterfly_inplace(a)
	return a


def sequency_inplace(a: np.ndarray) -> np.ndarray:
	"""Sequency ordered transform written into a, which is also returned."""
	_check_inplace(a)
	butterfly_inplace(a)
	a[...] = a[..., sequency_permutation(a.shape[-1])]
	return a


def scale(v) -> np.ndarray:
	"""Divide v by its length (last axis).

	Both transforms are their own inverse up to a factor of n, so
	scale(hadamard(hadamard(x))) recovers x, and likewise for sequency. The
	result is float64, or complex when v is complex. The length need not be a
	power of two; an empty v gives an empty result.
	"""
	v = np.asarray(v)
	if v.ndim not in (1, 2):
		raise ValueError("Input must be 1D or 2D array")
	v = v.astype(np.result_type(v, np.float64))
	n = v.shape[-1]
	if n == 0:
		return v
	return v / n
