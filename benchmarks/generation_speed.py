"""Pattern generation benchmark.

Generates and renders every pattern repeatedly at a given size and reports
the time per frame, to check that a key press redraws well inside one
display refresh even on a large terminal.

Usage:
    python benchmarks/generation_speed.py [--columns N] [--rows N] [--frames N]

Options:
    --columns N     Grid width (default: 200)
    --rows N        Grid height (default: 60)
    --frames N      Frames per pattern (default: 50)
"""

import argparse
import statistics
import time

import midiascii

# ---------------------------------------------------------------------------

FRAME_BUDGET_MS = 16.7   # one refresh at 60 Hz


def _run_benchmark (index: int, columns: int, rows: int, frames: int) -> list[float]:

	"""Generate and render *frames* frames of one pattern; return per-frame times (ms)."""

	timings: list[float] = []

	for salt in range(frames):
		start = time.perf_counter()
		midiascii.render(midiascii.generate(index, columns, rows, salt))
		timings.append((time.perf_counter() - start) * 1000)

	return timings


def _print_report (name: str, timings: list[float]) -> None:

	mean = statistics.mean(timings)
	worst = max(timings)
	verdict = "ok" if worst < FRAME_BUDGET_MS else "over budget"

	print(f"  {name:<10} mean {mean:7.2f} ms   max {worst:7.2f} ms   {verdict}")


def main () -> None:

	parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument("--columns", type=int, default=200, help="Grid width (default: 200)")
	parser.add_argument("--rows",    type=int, default=60,  help="Grid height (default: 60)")
	parser.add_argument("--frames",  type=int, default=50,  help="Frames per pattern (default: 50)")
	args = parser.parse_args()

	print(f"\n{args.columns}x{args.rows}, {args.frames} frames per pattern\n")

	for index, pattern in enumerate(midiascii.PATTERNS):
		_print_report(pattern.name, _run_benchmark(index, args.columns, args.rows, args.frames))

	print()


if __name__ == "__main__":
	main()
