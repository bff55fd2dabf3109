#! /usr/bin/env python
"""
constants - General constants of use to seqo operations.
"""
import re
import types

# The max number of indexes a single range expansion may produce before a
# MaxSizeException exception is raised
MAX_INDEX_COUNT = 10000000

# Minimum number of indexes an assembled collection must hold
DEFAULT_MIN_ITEMS = 2

# Default template used to format and parse collections.
# Example: file_%02d.txt [1-2, 4-5, 7]
DEFAULT_FORMAT = "{head}{padding}{tail} [{ranges}]"

# Regular expression pattern for a run of ASCII digits with optional leading zeros.
# Every assembly pattern must provide the 'index' group and may provide the
# 'padding' group (the leading zeros).
DIGITS_PATTERN = r"(?P<index>(?P<padding>0*)[0-9]+)"

# Read-only table of common assembly patterns.
# Example frames: /film/shot/renders/bilbo_bty.0001.exr
# Example versions: bilbo_bty_v002.exr
PATTERNS = types.MappingProxyType({
    "digits": DIGITS_PATTERN,
    "frames": r"\.{0}\.[^0-9]+[0-9]?$".format(DIGITS_PATTERN),
    "versions": r"v{0}".format(DIGITS_PATTERN),
})

# Regular expression for a template placeholder, ie {head}.
# Braces holding anything but letters and underscores are literal text.
PLACEHOLDER_PATTERN = r"\{([A-Za-z_]+)\}"
PLACEHOLDER_RE = re.compile(PLACEHOLDER_PATTERN)

# Capturing sub-patterns substituted for each placeholder when parsing
PARSE_EXPRESSIONS = types.MappingProxyType({
    "head": r"(?P<head>.*)",
    "tail": r"(?P<tail>.*)",
    "padding": r"%(?P<padding>[0-9]*)d",
    "range": r"(?P<range>[0-9]+(?:-[0-9]+)?)?",
    "ranges": r"(?P<ranges>[0-9 ,\-]+)?",
    "holes": r"(?P<holes>[0-9 ,\-]+)?",
})

