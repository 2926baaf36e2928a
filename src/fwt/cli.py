import argparse
import logging
import numpy as np
from .butterfly import power_of_2
from .matrices import hadamard_matrix, walsh_matrix
from .transforms import hadamard, sequency, scale


logger = logging.getLogger(__name__)

TRANSFORMS = {
	"hadamard": (hadamard, hadamard_matrix),
	"sequency": (sequency, walsh_matrix),
}


def _size(value):
	n = int(value)
	if not power_of_2(n):
		raise argparse.ArgumentTypeError(f"{value} is not a power of two")
	return n


def main(argv=None):
	p = argparse.ArgumentParser(description="Fast Walsh Transform accuracy check")
	p.add_argument("--size", type=_size, default=256, help="Transform size (power of two)")
	p.add_argument("--order", type=str, default="hadamard", choices=sorted(TRANSFORMS), help="Output ordering")
	p.add_argument("--repeat", type=int, default=1, help="Repeat runs and average metrics")
	p.add_argument("--seed", type=int, default=123)
	p.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
	args = p.parse_args(argv)

	logging.basicConfig(level=getattr(logging, args.log_level), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

	rng = np.random.default_rng(args.seed)
	transform, reference = TRANSFORMS[args.order]
	W = reference(args.size)
	logger.info(f"Checking {args.order} transform N={args.size} repeat={args.repeat}")

	errors = []

	for _ in range(args.repeat):
		x = rng.standard_normal(args.size)
		y_fast = transform(x)
		y_dense = W @ x
		x_back = scale(transform(y_fast))

		max_err = float(np.max(np.abs(y_fast - y_dense)))
		rmse = float(np.sqrt(np.mean((x_back - x) ** 2)))
		errors.append((max_err, rmse))

	mean_max_err = float(np.mean([e for e, _ in errors]))
	mean_rmse = float(np.mean([r for _, r in errors]))
	logger.info("Check complete")

	print(f"order={args.order} N={args.size}")
	print(f"MaxAbsErr={mean_max_err:.6g} RoundtripRMSE={mean_rmse:.6g}")


if __name__ == "__main__":
	main()
