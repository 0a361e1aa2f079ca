import math
from collections.abc import Collection, Mapping, Sequence

SCALAR_TYPES = (bool, str, int, float)

def is_scalar(value):
    return isinstance(value, SCALAR_TYPES)

def is_nan(value):
    return isinstance(value, float) and math.isnan(value)

def value_key(value):
    """
    Returns a hashable key for a scalar value that keeps booleans apart from
    numbers (True == 1 in Python) while still letting 1 and 1.0 collide.
    """
    return (isinstance(value, bool), value)

def is_empty_container(value):
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, Collection) and len(value) == 0

def is_dense_sequence(symbol_data):
    """ True if symbol_data should be read as an ordered list of names. """
    if isinstance(symbol_data, Mapping):
        keys = list(symbol_data.keys())
        if not all(_is_index(k) for k in keys):
            return False
        return set(keys) == set(range(1, len(keys) + 1))
    return isinstance(symbol_data, Sequence) and not isinstance(symbol_data, (str, bytes, bytearray))

def sequence_entries(symbol_data):
    """ Yields the names of a dense sequence in position order. """
    if isinstance(symbol_data, Mapping):
        for index in range(1, len(symbol_data) + 1):
            yield symbol_data[index]
    else:
        for name in symbol_data:
            yield name

def _is_index(key):
    # 1.0 indexes the same slot as 1
    if isinstance(key, float):
        return key.is_integer()
    return type(key) is int
