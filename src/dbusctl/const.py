"""Constants for the D-Bus call utility."""

# Environment
ENV_BUS_ADDRESS = "DBUSCTL_BUS_ADDRESS"

# Argument grammar
TYPE_SEPARATOR = ":"
VALUE_SEPARATOR = ","
QUOTE_CHAR = '"'

KEYWORD_ARRAY = "array"
KEYWORD_DICT = "dict"

ARGUMENT_GRAMMAR_HELP = (
    "Expected one of:\n"
    "  <type>:<value>\n"
    "  array:<type>:<value>,<value>,...\n"
    "  dict:string:<type>:<key>,<value>,<key>,<value>,...\n"
    "Types: string, int16, uint16, int32, uint32, int64, uint64, byte, "
    "double, boolean (bool), objpath, signature.\n"
    'Wrap values containing commas in double quotes, e.g. array:string:"a,b",c'
)

# Inclusive integer bounds, keyed by D-Bus signature code.
INTEGER_BOUNDS = {
    "y": (0, 2**8 - 1),
    "n": (-(2**15), 2**15 - 1),
    "q": (0, 2**16 - 1),
    "i": (-(2**31), 2**31 - 1),
    "u": (0, 2**32 - 1),
    "x": (-(2**63), 2**63 - 1),
    "t": (0, 2**64 - 1),
}

# Well-known D-Bus error names
ERROR_PREFIX = "org.freedesktop.DBus.Error."

ERRORS_SERVICE_UNKNOWN = {
    f"{ERROR_PREFIX}ServiceUnknown",
    f"{ERROR_PREFIX}NameHasNoOwner",
}
ERRORS_NOT_FOUND = {
    f"{ERROR_PREFIX}UnknownMethod",
    f"{ERROR_PREFIX}UnknownObject",
    f"{ERROR_PREFIX}UnknownInterface",
    f"{ERROR_PREFIX}UnknownProperty",
}
ERRORS_ACCESS_DENIED = {
    f"{ERROR_PREFIX}AccessDenied",
    f"{ERROR_PREFIX}AuthFailed",
}
ERRORS_INVALID_ARGS = {
    f"{ERROR_PREFIX}InvalidArgs",
    f"{ERROR_PREFIX}InvalidSignature",
}
ERRORS_TIMEOUT = {
    f"{ERROR_PREFIX}NoReply",
    f"{ERROR_PREFIX}Timeout",
    f"{ERROR_PREFIX}TimedOut",
}
