import sys
from contextlib import contextmanager


@contextmanager
def status(message):
  """Write a temporary status message that is cleared once processing is complete."""
  if sys.stderr.isatty():
    sys.stderr.write(message)
    sys.stderr.flush()
    try:
      yield
    finally:
      sys.stderr.write("\r\x1B[0K")
      sys.stderr.flush()
  else:
    yield


def warning(message):
  """Highlighted message on stderr, plain if not a terminal"""
  if sys.stderr.isatty():
    sys.stderr.write(f"\x1B[1;33m{message}\x1B[0m\n")
  else:
    sys.stderr.write(f"{message}\n")
