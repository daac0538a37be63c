import sys

from curvemath.cli.help import print_help, print_version
from curvemath.util import parse_int


class Args:

  def __init__(self):
    self.mode = None
    self.params = []
    self.curve = ""
    self.attempts = ""
    self.stride = ""
    self.rounds = ""
    self.naf = None
    self.ladder = None
    self.debug = None


mulargs = dict(
  curve='-c --curve'.split(),
  naf='--naf'.split(),
  ladder='-x --ladder'.split(),
  debug='--debug'.split(),
)

addargs = dict(
  curve='-c --curve'.split(),
  debug='--debug'.split(),
)

mapargs = dict(
  curve='-c --curve'.split(),
  attempts='-n --attempts'.split(),
  stride='-s --stride'.split(),
  debug='--debug'.split(),
)

checkargs = dict(
  curve='-c --curve'.split(),
  debug='--debug'.split(),
)

benchargs = dict(
  curve='-c --curve'.split(),
  rounds='-n --rounds'.split(),
  debug='--debug'.split(),
)


def isnumber(a):
  """Negative numbers such as -5 or -0x10 are values, not flags"""
  try:
    parse_int(a)
  except ValueError:
    return False
  return True

def needhelp(av):
  """Check for -h and --help but not past --"""
  for a in av:
    if a == '--': return False
    if a.lower() in ('-h', '--help'): return True
  return False

def subcommand(arg):
  if arg in ('mul', 'multiply'): return 'mul', mulargs
  if arg in ('add', ): return 'add', addargs
  if arg in ('map', ): return 'map', mapargs
  if arg in ('check', 'validate'): return 'check', checkargs
  if arg in ('bench', 'benchmark'): return 'bench', benchargs
  if arg in ('help', ): return 'help', {}
  return None, {}

def argparse():
  # Custom parsing in the same style as the rest of the CLI (negative numbers are values, not flags)
  av = sys.argv[1:]
  if not av:
    print_help()

  if any(a.lower() in ('-v', '--version') for a in av):
    print_version()

  args = Args()
  args.mode, ad = subcommand(av[0])

  if args.mode == 'help' or needhelp(av):
    if args.mode == 'help' and len(av) == 2 and (mode := subcommand(av[1])[0]):
      print_help(mode)
    print_help(args.mode or "help")

  if args.mode is None:
    sys.stderr.write(' 💣  Invalid or missing command (mul/add/map/check/bench/help).\n')
    sys.exit(1)

  aiter = iter(av[1:])
  shortargs = [flag[1:] for switches in ad.values() for flag in switches if not flag.startswith("--")]
  for a in aiter:
    aprint = a
    if not a.startswith('-') or isnumber(a):
      args.params.append(a)
      continue
    if a == '--':
      args.params += aiter
      break
    if a.startswith('--'):
      a = a.lower()
    if not a.startswith('--') and len(a) > 2:
      if any(arg not in shortargs for arg in list(a[1:])):
        falseargs = [arg for arg in list(a[1:]) if arg not in shortargs]
        print_help(args.mode, f' 💣  Unknown argument: curvemath {args.mode} {a} (failing -{" -".join(falseargs)})')
      a = [f'-{shortarg}' for shortarg in list(a[1:]) if shortarg in shortargs]
    if isinstance(a, str):
      a = [a]
    for av in a:
      argvar = next((k for k, v in ad.items() if av in v), None)
      if argvar is None:
        print_help(args.mode, f' 💣  Unknown argument: curvemath {args.mode} {aprint}')
      try:
        var = getattr(args, argvar)
        if isinstance(var, list):
          var.append(next(aiter))
        elif isinstance(var, str):
          setattr(args, argvar, next(aiter))
        else:
          setattr(args, argvar, True)
      except StopIteration:
        print_help(args.mode, f' 💣  Argument parameter missing: curvemath {args.mode} {aprint} …')

  return args
