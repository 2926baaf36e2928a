import logging

import numpy as np


logger = logging.getLogger(__name__)


class InvalidLength(ValueError):
	"""Raised when a sequence length is zero or not a power of two."""

	def __init__(self, length: int):
		self.length = length
		super().__init__(f"Length must be power of two and > 0, got {length}")


def power_of_2(n: int) -> bool:
	"""Return True if n is a positive power of two, in O(1) time."""
	return n > 0 and (n & (n - 1)) == 0


def log2_length(n: int) -> int:
	"""Return k with n == 2**k, raising InvalidLength otherwise."""
	if not power_of_2(n):
		logger.debug(f"rejected length {n}")
		raise InvalidLength(n)
	return n.bit_length() - 1


def butterfly_stages(a: np.ndarray):
	"""Run the butterfly passes over the last axis of a, in place.

	Yields the stage index once stage s has been fully written, so stage s+1
	only ever reads completed results. The length is validated before the
	first stage, so a rejected array is never touched.

	After the last stage a holds the transform in Hadamard (natural) order.
	"""
	n = a.shape[-1]
	k = log2_length(n)
	lead = a.shape[:-1]
	h = 1
	for stage in range(k):
		# Splitting the last axis into (blocks, 2, h) is always a view.
		blocks = a.reshape(lead + (n // (2 * h), 2, h))
		left = blocks[..., 0, :].copy()
		right = blocks[..., 1, :]
		blocks[..., 0, :] += right
		blocks[..., 1, :] = left - right
		h *= 2
		yield stage


def butterfly_inplace(a: np.ndarray) -> None:
	"""In-place Fast Walsh-Hadamard butterfly over the last axis (unnormalized)."""
	stages = 0
	for _ in butterfly_stages(a):
		stages += 1
	logger.debug(f"butterfly n={a.shape[-1]} stages={stages}")
