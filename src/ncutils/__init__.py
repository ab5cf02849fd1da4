"""
ncutils: OS detection, private app directories and block-wise stream copying
"""

__version__ = "1.0.0"
__author__ = "Nelson Crosby"

from .system import (
    OSFamily,
    SystemIdentity,
    classify_os,
    current_os_name,
    get_system,
    generate_private_directory,
    get_private_file,
)
from .streams import (
    ByteSink,
    copy_streams,
    read_whole_stream,
    read_whole_file,
    write_to_stream,
    write_to_file,
)
from .constants import DEFAULT_BLOCK_SIZE
from .exceptions import (
    NCUtilsError,
    ValidationError,
    InvalidBlockSizeError,
    DirectoryUnavailableError,
)

__all__ = [
    "OSFamily",
    "SystemIdentity",
    "classify_os",
    "current_os_name",
    "get_system",
    "generate_private_directory",
    "get_private_file",
    "ByteSink",
    "copy_streams",
    "read_whole_stream",
    "read_whole_file",
    "write_to_stream",
    "write_to_file",
    "DEFAULT_BLOCK_SIZE",
    "NCUtilsError",
    "ValidationError",
    "InvalidBlockSizeError",
    "DirectoryUnavailableError",
]
