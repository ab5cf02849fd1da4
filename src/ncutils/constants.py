"""
Constants used throughout the ncutils library
"""

# Stream constants
DEFAULT_BLOCK_SIZE = 1024
DEFAULT_ENCODING = "utf-8"

# Environment overrides
OS_NAME_ENV_VAR = "NCUTILS_OS_NAME"

# Private directory roots, relative to the user's home directory
PRIVATE_DIRECTORY_ROOTS = {
    "windows": "AppData/Roaming",
    "mac": "Library/Application Support",
    "linux": ".local/share",
    "other": "",
}

# Prepended to app names on systems without an app-data convention
HIDDEN_PREFIX = "."

# platform.system() names that do not contain their family's keyword
SYSTEM_NAME_ALIASES = {
    "Darwin": "Mac OS X",
}
