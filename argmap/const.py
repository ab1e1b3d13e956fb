VERSION = (0, 4, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"


ARGV0 = "argmap"
DESCRIPTION = "Parse command-line arguments into a list of positionals and a map of options"
BOOLEANS_ENV = "ARGMAP_BOOLEANS"
EXTRA_ARGS_ENV = "ARGMAP_EXTRA_ARGS"
