import sys, logging, argparse
from .common import xfmt
from .codec import to_half, to_float
from .classify import category, get_sign, get_exponent, get_significand
from .hexfmt import to_hex_string
from . import vectors

logger = logging.getLogger('tinyhalf')

def parse_value(text):  # hex is taken as a bit pattern, anything else as a float literal
    if text.lower().lstrip('+-').startswith('0x'): return int(text, 16)
    return to_half(float(text))

def dump_line(h, trace=False):
    line = f'{xfmt(16, h)}: {category(h):9} {to_float(h)!r:>16}  {to_hex_string(h)}'
    if trace: line += f'  sign={"-" if get_sign(h) < 0 else "+"} exp={get_exponent(h)} sig={get_significand(h):#05x}'
    return line

def run_dump():
    parser = argparse.ArgumentParser(
                    prog='tinyhalf-dump',
                    description='Prints the decomposition of binary16 values given as hex bit patterns or decimal floats.',
                    epilog='Put -- in front of values starting with a minus sign, e.g. tinyhalf-dump -- -inf.')
    parser.add_argument('-t', '--trace', action='store_true', help='also print sign, exponent and significand fields')
    parser.add_argument('values', nargs='+', type=parse_value)
    args = parser.parse_args()
    for h in args.values: print(dump_line(h, trace=args.trace))
    return 0

def run_check():
    parser = argparse.ArgumentParser(
                    prog='tinyhalf-check',
                    description='Runs the reference vectors against the library.')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('--vectors', metavar='FILE', help='vector table to run instead of the packaged one')
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='%(levelname)s: %(message)s')
    try: table = vectors.load(args.vectors)
    except vectors.VectorError as e:
        logger.error(e)
        return 2
    failed = 0
    def fmt(v): return hex(v) if isinstance(v, int) else repr(v)
    for section, value, expected, got in vectors.run(table):
        logger.error(f'{section}({fmt(value)}): expected {fmt(expected)}, got {fmt(got)}')
        failed += 1
    total = sum(len(cases) for cases in table.values())
    logger.info(f'{total-failed}/{total} vectors passed')
    return 1 if failed else 0

if __name__ == '__main__': sys.exit(run_check())
