from . import commands
from .command_set import CommandSet
from .sgd import SGDCommand, do, getvar, setvar
from .template import CommandTemplate, Param
from .types import (
    AnyOf,
    Alphanumeric,
    Binary,
    BooleanValue,
    IntegerRange,
    Number,
    OneOf,
    ParamType,
    Pattern,
    Text,
    as_param_type,
    validate_value,
)

__all__ = [
    "Alphanumeric",
    "AnyOf",
    "as_param_type",
    "Binary",
    "BooleanValue",
    "commands",
    "CommandSet",
    "CommandTemplate",
    "do",
    "getvar",
    "IntegerRange",
    "Number",
    "OneOf",
    "Param",
    "ParamType",
    "Pattern",
    "setvar",
    "SGDCommand",
    "Text",
    "validate_value",
]
