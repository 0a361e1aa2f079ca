from symenum.errors import EnumException, InvalidArgument, InvalidAttribute, ImmutableViolation
from symenum.symbols import Symbol, is_symbol
from symenum.enums import Enum, is_enum

__version__ = "0.1.0"
