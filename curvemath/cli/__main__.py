import sys
from typing import NoReturn

import colorama

from curvemath.cli.args import argparse
from curvemath.cli.bench import main_bench
from curvemath.cli.point import main_add, main_check, main_map, main_mul

modes = {
  "mul": main_mul,
  "add": main_add,
  "map": main_map,
  "check": main_check,
  "bench": main_bench,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  Consider calling the curvemath modules directly if you use from Python code.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted
  * 3 I/O error (broken pipe)
  * 10 Arithmetic errors (not invertible, no valid point, invalid parameters, bad input)

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  args = argparse()

  # Run the mode-specific main function
  if args.debug:
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    modes[args.mode](args)  # Normal run
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except BrokenPipeError:
    sys.stderr.write('I/O error (broken pipe)\n')
    sys.exit(3)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()
