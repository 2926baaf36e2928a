import numpy as np
import pytest

from fwt import InvalidLength, hadamard_matrix, sequency_permutation, walsh_matrix
from fwt.bits import bit_reverse, gray_code, gray_decode, hadamard_to_sequency, sequency_to_hadamard
from fwt.butterfly import butterfly_stages, log2_length, power_of_2


def _sign_changes(row):
	return int(np.count_nonzero(row[1:] != row[:-1]))


def test_bit_reverse():
	assert bit_reverse(0, 0) == 0
	assert bit_reverse(1, 3) == 4
	assert bit_reverse(6, 3) == 3
	assert bit_reverse(1, 10) == 512
	for k in range(1, 8):
		for i in range(2 ** k):
			assert bit_reverse(bit_reverse(i, k), k) == i


def test_gray_code():
	assert [gray_code(i) for i in range(8)] == [0, 1, 3, 2, 6, 7, 5, 4]
	for i in range(256):
		assert gray_decode(gray_code(i)) == i
		# Neighbouring codes differ in one bit
		assert bin(gray_code(i) ^ gray_code(i + 1)).count("1") == 1


def test_sequency_permutation_n8():
	assert sequency_permutation(8).tolist() == [0, 4, 6, 2, 3, 7, 5, 1]


def test_sequency_permutation_is_bijection():
	for k in range(11):
		n = 2 ** k
		perm = sequency_permutation(n)
		assert perm.shape == (n,)
		assert np.array_equal(np.sort(perm), np.arange(n))
		assert perm.tolist() == [sequency_to_hadamard(p, k) for p in range(n)]


def test_sequency_maps_are_inverse():
	for k in range(7):
		for p in range(2 ** k):
			assert hadamard_to_sequency(sequency_to_hadamard(p, k), k) == p


def test_hadamard_row_sequency():
	H = hadamard_matrix(16)
	for h in range(16):
		assert _sign_changes(H[h]) == hadamard_to_sequency(h, 4)


def test_walsh_rows_in_sequency_order():
	for n in [1, 2, 4, 8, 32]:
		W = walsh_matrix(n)
		assert [_sign_changes(row) for row in W] == list(range(n))


def test_power_of_2():
	for n in [1, 2, 4, 8, 16, 1 << 31, 1 << 63]:
		assert power_of_2(n)
	for n in [0, 3, 5, 6, 7, 9, (1 << 64) - 1, -4]:
		assert not power_of_2(n)


def test_invalid_length():
	assert log2_length(1) == 0
	assert log2_length(1024) == 10
	with pytest.raises(InvalidLength) as exc:
		log2_length(12)
	assert exc.value.length == 12
	with pytest.raises(InvalidLength):
		sequency_permutation(0)
	with pytest.raises(InvalidLength):
		walsh_matrix(6)


def test_stage_count():
	for k in range(8):
		a = np.zeros(2 ** k)
		assert list(butterfly_stages(a)) == list(range(k))
