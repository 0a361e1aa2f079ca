import logging
import weakref
from collections.abc import Mapping, Sequence
from symenum import errors
from symenum import utils
from symenum.symbols import create_symbol, is_symbol

log = logging.getLogger(__name__)

# The membership test is reached by attribute, so no symbol may share its name.
RESERVED_KEYS = frozenset(["has"])

# id(instance) -> instance for every fully constructed Enum
_enum_registry = weakref.WeakValueDictionary()

class Enum(object):
    """
    An immutable, ordered collection of Symbols indexed by name, by 1-based
    position and by value.

        Color = Enum(["RED", "GREEN", "BLUE"])
        Color["RED"] == Color("RED") == Color[1]

        Status = Enum({"ACTIVE": 1, "DISABLED": 0})
        Status(0) == Status.DISABLED

    Two enums are only ever equal if they are the same instance.
    """
    __slots__ = ("_symbols", "_by_name", "_by_value", "__weakref__")

    def __new__(cls, symbol_data):
        return cls.create(symbol_data)

    @classmethod
    def create(cls, symbol_data):
        if not _is_symbol_container(symbol_data) or len(symbol_data) == 0:
            raise errors.InvalidArgument("Enum symbols must be a non-empty sequence or mapping")

        self_valued = utils.is_dense_sequence(symbol_data)
        if self_valued:
            entries = ((name, name) for name in utils.sequence_entries(symbol_data))
        else:
            entries = symbol_data.items()

        # Symbols need the instance as their enum while it is still empty
        instance = object.__new__(cls)
        object.__setattr__(instance, "_symbols", ())
        object.__setattr__(instance, "_by_name", {})
        object.__setattr__(instance, "_by_value", {})

        symbols = []
        by_name = {}
        by_value = {}
        for name, value in entries:
            if isinstance(name, str) and name in RESERVED_KEYS:
                raise errors.InvalidArgument("Enum symbol name conflicts with reserved key: %s" % name)

            symbol = create_symbol(instance, name, value)
            if symbol.name in by_name:
                raise errors.InvalidArgument("Enum symbol name is not unique: %s" % symbol.name)

            key = utils.value_key(symbol.value)
            if not self_valued and key in by_value:
                raise errors.InvalidArgument("Enum symbol value is not unique: %s" % str(symbol.value))

            symbols.append(symbol)
            by_name[symbol.name] = symbol
            by_value[key] = symbol

        object.__setattr__(instance, "_symbols", tuple(symbols))
        object.__setattr__(instance, "_by_name", by_name)
        object.__setattr__(instance, "_by_value", by_value)
        _enum_registry[id(instance)] = instance
        log.debug("Created %s enum %r", "self-valued" if self_valued else "explicit", instance)
        return instance

    @staticmethod
    def is_enum(value):
        return is_enum(value)

    def has(self, symbol):
        """ True if symbol is this enum's own symbol for its name. """
        if not is_symbol(symbol):
            raise errors.InvalidArgument("symbol parameter must be a Symbol instance")
        return self._by_name.get(symbol.name) == symbol

    def items(self):
        """ Yields (name, value) pairs in definition order. """
        for symbol in self._symbols:
            yield symbol.name, symbol.value

    def __getitem__(self, key):
        if type(key) is int:
            if 1 <= key <= len(self._symbols):
                return self._symbols[key - 1]
            return None
        if isinstance(key, str):
            return self._by_name.get(key)
        return None

    def __getattr__(self, key):
        if key.startswith("_") or key not in self._by_name:
            raise errors.InvalidAttribute("Enum", key)
        return self._by_name[key]

    def __call__(self, value):
        if not utils.is_scalar(value) or utils.is_nan(value):
            return None
        return self._by_value.get(utils.value_key(value))

    def __contains__(self, symbol):
        return is_symbol(symbol) and self.has(symbol)

    def __len__(self):
        return len(self._symbols)

    def __iter__(self):
        return iter(self._symbols)

    def __setattr__(self, key, value):
        raise errors.ImmutableViolation("Enum")

    def __delattr__(self, key):
        raise errors.ImmutableViolation("Enum")

    def __setitem__(self, key, value):
        raise errors.ImmutableViolation("Enum")

    def __delitem__(self, key):
        raise errors.ImmutableViolation("Enum")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __repr__(self):
        return "<Enum(0x%x): %s>" % (id(self), ", ".join(s.name for s in self._symbols))

def _is_symbol_container(symbol_data):
    if isinstance(symbol_data, Mapping):
        return True
    return isinstance(symbol_data, Sequence) and not isinstance(symbol_data, (str, bytes, bytearray))

def is_enum(value):
    """ True only for instances produced by Enum.create. """
    return isinstance(value, Enum) and _enum_registry.get(id(value)) is value
