from curvemath.cli.bench import main_bench
from curvemath.cli.point import main_add, main_check, main_map, main_mul
