import sys

import pytest

from curvemath import CURVE25519, ED25519, SECP256K1
from curvemath.cli.__main__ import main
from curvemath.cli.args import argparse

G = SECP256K1.G
# 2G on secp256k1
G2 = (
  0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5,
  0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A,
)


def test_argparser(capsys):
  sys.argv = "curvemath mul -c curve25519 --naf 0x10".split()
  a = argparse()
  assert a.mode == "mul"
  assert a.curve == "curve25519"
  assert a.naf is True
  assert a.ladder is None
  assert a.params == ["0x10"]
  cap = capsys.readouterr()
  assert not cap.out
  assert not cap.err

  # Combined short flags, negative numbers are values
  sys.argv = "curvemath multiply -xc curve25519 -5".split()
  a = argparse()
  assert a.mode == "mul"
  assert a.ladder is True
  assert a.curve == "curve25519"
  assert a.params == ["-5"]

  # Negative hex is a value too
  sys.argv = "curvemath mul -0x10 0x5 -0X_ff".split()
  a = argparse()
  assert a.params == ["-0x10", "0x5", "-0X_ff"]

  # Everything after -- is a parameter
  sys.argv = "curvemath map -s 100 -- 42 --naf".split()
  a = argparse()
  assert a.stride == "100"
  assert a.params == ["42", "--naf"]

  # Missing argument parameter
  sys.argv = "curvemath map 42 -n".split()
  with pytest.raises(SystemExit):
    argparse()
  cap = capsys.readouterr()
  assert not cap.out
  assert "Argument parameter missing: curvemath map -n …" in cap.err

  # Flag of another command
  sys.argv = "curvemath add --naf 1 2 3 4".split()
  with pytest.raises(SystemExit):
    argparse()
  cap = capsys.readouterr()
  assert "Unknown argument: curvemath add --naf" in cap.err


## End-to-End testing: running curvemath as if it was ran from command line

# A fixture to run curvemath more easily, checks exitcode and returns its output
@pytest.fixture
def curvemath(capsys):
  def run_main(*args, exitcode=0):
    if args and args[0] == "curvemath":
      raise ValueError("Only arguments please, no 'curvemath' in the beginning")
    sys.argv = [str(arg) for arg in ("curvemath", *args)]
    with pytest.raises(SystemExit) as exc:
      main()
    assert exc.value.code == exitcode, f"Was expecting {exitcode=} but curvemath did sys.exit({exc.value.code})"
    return capsys.readouterr()
  return run_main


def test_mul(curvemath):
  cap = curvemath("mul", 2)
  assert cap.out == f"x = {G2[0]:#x}\ny = {G2[1]:#x}\n"
  assert not cap.err

  cap = curvemath("mul", "--naf", 2)
  assert cap.out == f"x = {G2[0]:#x}\ny = {G2[1]:#x}\n"

  # Explicit point given in hex and decimal
  cap = curvemath("mul", 1, hex(G2[0]), G2[1])
  assert cap.out == f"x = {G2[0]:#x}\ny = {G2[1]:#x}\n"

  cap = curvemath("mul", 0)
  assert cap.out == "INFINITY\n"
  cap = curvemath("mul", hex(SECP256K1.n))
  assert cap.out == "INFINITY\n"

  # Negative scalar gives -G
  cap = curvemath("mul", -1)
  assert cap.out == f"x = {G.x:#x}\ny = {SECP256K1.p - G.y:#x}\n"
  cap = curvemath("mul", "-0x2")
  assert cap.out == f"x = {G2[0]:#x}\ny = {SECP256K1.p - G2[1]:#x}\n"


def test_mul_curve25519(curvemath):
  cap = curvemath("mul", "-c", "curve25519", 1)
  assert cap.out == f"x = 0x9\ny = {CURVE25519.G.y:#x}\n"

  cap = curvemath("mul", "--curve", "Curve25519", "--ladder", 1)
  assert cap.out == "x = 0x9\n"
  cap = curvemath("mul", "-xc", "curve25519", 0)
  assert cap.out == "INFINITY\n"

  # Ladder and double-and-add agree on the u coordinate
  k = 0x1234567890ABCDEF
  ladder = curvemath("mul", "-xc", "curve25519", hex(k)).out
  full = curvemath("mul", "-c", "curve25519", hex(k)).out
  assert full.startswith(ladder)


def test_mul_ed25519(curvemath):
  B = ED25519.G
  cap = curvemath("mul", "-c", "ed25519", 1)
  assert cap.out == f"x = {B.x:#x}\ny = {B.y:#x}\n"
  cap = curvemath("mul", "-c", "ed25519", "--naf", hex(ED25519.n))
  assert cap.out == "INFINITY\n"
  cap = curvemath("mul", "-c", "ed25519", 2, B.x, B.y)
  assert not cap.err
  curvemath("mul", "-xc", "ed25519", 1, exitcode=10)


def test_mul_errors(curvemath):
  cap = curvemath("mul", "-x", 5, exitcode=10)
  assert "only available on Montgomery curves" in cap.err
  cap = curvemath("mul", "five", exitcode=10)
  assert "Not an integer" in cap.err
  cap = curvemath("mul", 1, 2, exitcode=10)
  assert "Expected a scalar" in cap.err
  cap = curvemath("mul", "-c", "p256", 1, exitcode=10)
  assert "Unknown curve 'p256'" in cap.err


def test_add(curvemath):
  cap = curvemath("add", G.x, G.y, G.x, G.y)
  assert cap.out == f"x = {G2[0]:#x}\ny = {G2[1]:#x}\n"
  assert not cap.err

  cap = curvemath("add", G.x, G.y, G.x, SECP256K1.p - G.y)
  assert cap.out == "INFINITY\n"

  # Off-curve points are accepted with a warning
  cap = curvemath("add", 1, 2, 3, 4)
  assert "is not on secp256k1" in cap.err
  assert cap.out.startswith("x = ")

  # Same x but not negatives: no slope
  cap = curvemath("add", 1, 2, 1, 3, exitcode=10)
  assert "not invertible" in cap.err

  curvemath("add", 1, 2, 3, exitcode=10)


def test_map(curvemath):
  cap = curvemath("map", 1234)
  x = int(cap.out.split("\n")[0][4:], 16)
  assert 1234 <= x < 1334

  cap = curvemath("map", "-c", "curve25519", "-s", 100, 31337)
  x = int(cap.out.split("\n")[0][4:], 16)
  assert x // 100 == 31337

  cap = curvemath("map", hex(SECP256K1.p), exitcode=10)
  assert "does not fit" in cap.err
  cap = curvemath("map", "-n", 0, 5, exitcode=10)
  assert "Attempts must be" in cap.err
  curvemath("map", exitcode=10)


def test_check(curvemath, mocker):
  cap = curvemath("check")
  assert cap.out == "secp256k1: OK\ncurve25519: OK\ned25519: OK\n"

  cap = curvemath("check", "-c", "curve25519")
  assert cap.out == "curve25519: OK\n"

  curvemath("check", "secp256k1", exitcode=10)

  mocker.patch("curvemath.cli.point.validate_parameters", side_effect=KeyboardInterrupt)
  cap = curvemath("check", exitcode=2)
  assert "Interrupted" in cap.err


def test_bench(curvemath, mocker):
  cap = curvemath("bench", "-n", 2)
  lines = cap.out.splitlines()
  assert len(lines) == 7
  assert lines[0].startswith("secp256k1")
  assert "ladder" in lines[4]
  assert lines[-1].startswith("ed25519")

  cap = curvemath("bench", "-c", "secp256k1", "--rounds", 1)
  assert len(cap.out.splitlines()) == 2

  curvemath("bench", "-n", 0, exitcode=10)

  mocker.patch("curvemath.cli.bench.print", side_effect=BrokenPipeError, create=True)
  cap = curvemath("bench", "-n", 1, exitcode=3)
  assert "broken pipe" in cap.err


def test_debug(curvemath):
  # Errors are not caught with --debug
  sys.argv = "curvemath mul --debug -c nonexistent 1".split()
  with pytest.raises(ValueError):
    main()
  curvemath("mul", "--debug", 2)


def test_help(curvemath):
  cap = curvemath()
  assert "scalar multiplication" in cap.out
  cap = curvemath("help")
  assert "Montgomery ladder" in cap.out
  cap = curvemath("help", "map")
  assert "stride" in cap.out
  assert "ladder" not in cap.out
  cap = curvemath("bench", "--help")
  assert "rounds" in cap.out
  cap = curvemath("--version")
  assert cap.out.startswith("curvemath ")

  cap = curvemath("encrypt", exitcode=1)
  assert "Invalid or missing command" in cap.err
  cap = curvemath("mul", "--bogus", exitcode=1)
  assert "Unknown argument" in cap.err
