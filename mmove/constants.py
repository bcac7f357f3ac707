"""Shared constants."""

import logging


# Paths are split and joined lexically on this separator only
PATH_SEPARATOR = "/"

# Directory listed when a pattern has no directory component
CURRENT_DIRECTORY = "."

WILDCARD = "*"

# Destination template markers: `#1`, `#2`, ...
MARKER_REGEX = r"#(\d+)"

# Environment variable prefix for CLI options (e.g. MMV_FORCE=1)
ENV_PREFIX = "MMV"

DEFAULT_LOG_LEVEL = logging.WARNING
VERBOSE_LOG_LEVEL = logging.DEBUG

ERROR_PREFIX = "mmv:"
