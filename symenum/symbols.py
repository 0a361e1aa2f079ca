"""
Symbols are the members of an Enum.  Each one is an immutable (enum, name, value)
triple.  They are only ever built by create_symbol, which Enum.create calls once
per entry, and every live instance is tracked in a weak registry so that
is_symbol can tell real Symbols apart from look-alikes.
"""
import weakref
from symenum import errors
from symenum import utils

# id(instance) -> instance, entries vanish once the instance is collected
_symbol_registry = weakref.WeakValueDictionary()

class Symbol(object):
    __slots__ = ("_enum", "_name", "_value", "__weakref__")

    def __new__(cls, *args, **kwargs):
        raise errors.InvalidArgument("Symbol instances can only be created by an Enum")

    @staticmethod
    def is_symbol(value):
        return is_symbol(value)

    @property
    def enum(self):
        return self._enum

    @property
    def name(self):
        return self._name

    @property
    def value(self):
        return self._value

    def __getattr__(self, key):
        raise errors.InvalidAttribute("Symbol", key)

    def __setattr__(self, key, value):
        raise errors.ImmutableViolation("Symbol")

    def __delattr__(self, key):
        raise errors.ImmutableViolation("Symbol")

    def __eq__(self, another):
        if not is_symbol(another):
            return NotImplemented
        if self._enum is not another._enum:
            return False
        return self._name == another._name and \
                utils.value_key(self._value) == utils.value_key(another._value)

    def __hash__(self):
        return hash((id(self._enum), self._name, utils.value_key(self._value)))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __repr__(self):
        return "<Symbol(0x%x): %s=%r>" % (id(self), self._name, self._value)

def create_symbol(enum, name, value):
    if not utils.is_empty_container(enum):
        raise errors.InvalidArgument("Symbol enum instance must be an empty container")
    if not isinstance(name, str) or not name:
        raise errors.InvalidArgument("Symbol name must be a non-empty string")
    if not utils.is_scalar(value):
        raise errors.InvalidArgument("Symbol value must be a boolean, string, or number")
    if utils.is_nan(value):
        raise errors.InvalidArgument("Symbol value must not be NaN")

    instance = object.__new__(Symbol)
    object.__setattr__(instance, "_enum", enum)
    object.__setattr__(instance, "_name", name)
    object.__setattr__(instance, "_value", value)
    _symbol_registry[id(instance)] = instance
    return instance

def is_symbol(value):
    """ True only for instances produced by create_symbol. """
    return isinstance(value, Symbol) and _symbol_registry.get(id(value)) is value
