"""Reference vectors: known conversions, renderings and roundings in YAML."""
import logging, pathlib, importlib.resources
import yaml
from . import codec, hexfmt, rounding

logger = logging.getLogger(__name__)

class VectorError(Exception): pass

def _rounded(op): return lambda text: op(codec.to_half(float(text)))

sections = {
    'to_half':         lambda text: codec.to_half(float(text)),
    'to_half_raw':     codec.to_half_raw,
    'hex':             hexfmt.to_hex_string,
    'ceil':            _rounded(rounding.ceil),
    'floor':           _rounded(rounding.floor),
    'trunc':           _rounded(rounding.trunc),
    'rint':            _rounded(rounding.rint),
    'round_half_away': _rounded(rounding.round_half_away),
}

def load(path=None):
    """Loads a vector table, by default the one shipped with the package."""
    source = pathlib.Path(path) if path else importlib.resources.files('tinyhalf') / 'vectors.yaml'
    try:
        with source.open() as f: table = yaml.safe_load(f)
        if not isinstance(table, dict): raise ValueError('top level is not a mapping')
        for name, cases in table.items():
            if name not in sections: raise KeyError(f'unknown section {name!r}')
            if not isinstance(cases, dict): raise ValueError(f'section {name!r} is not a mapping')
    except (OSError, yaml.YAMLError, KeyError, ValueError) as e: raise VectorError(f'unable to load vectors from {source}: {e}') from e
    logger.debug(f'loaded {sum(len(c) for c in table.values())} vectors in {len(table)} sections from {source}')
    return table

def run(table):  # yields (section, input, expected, got) for every mismatch
    for name, cases in table.items():
        for value, expected in cases.items():
            got = sections[name](value)
            if got != expected: yield name, value, expected, got
