"""
Operating system detection and per-application private directories
"""

import os
import logging
import platform
from enum import Enum
from functools import lru_cache
from pathlib import Path
from dataclasses import dataclass
from typing import Optional, Union

from .constants import (
    HIDDEN_PREFIX,
    OS_NAME_ENV_VAR,
    PRIVATE_DIRECTORY_ROOTS,
    SYSTEM_NAME_ALIASES,
)
from .exceptions import DirectoryUnavailableError

logger = logging.getLogger(__name__)


class OSFamily(Enum):
    """Coarse operating system classification"""

    WINDOWS = "windows"
    MAC = "mac"
    LINUX = "linux"
    OTHER = "other"

    @property
    def is_unix(self) -> bool:
        """True for UNIX-based systems (MAC, LINUX and OTHER)"""
        # Most undetected systems will be UNIX-based
        return self is not OSFamily.WINDOWS


def classify_os(os_name: str) -> OSFamily:
    """Classify an OS identification string, first match wins"""
    lowered = os_name.lower()
    for family in (OSFamily.WINDOWS, OSFamily.MAC, OSFamily.LINUX):
        if family.value in lowered:
            return family
    return OSFamily.OTHER


def current_os_name() -> str:
    """Return the OS identification string for this process"""
    override = os.environ.get(OS_NAME_ENV_VAR, "").strip()
    if override:
        return override
    system_name = platform.system()
    return SYSTEM_NAME_ALIASES.get(system_name, system_name)


@dataclass(frozen=True)
class SystemIdentity:
    """Immutable description of the host system and its private data root"""

    os_name: str
    family: OSFamily
    home: Path
    private_root: Path

    @classmethod
    def for_family(cls, family: OSFamily, home: Union[str, Path],
                   os_name: Optional[str] = None) -> "SystemIdentity":
        """Build an identity for a declared OS family"""
        home = Path(home)
        return cls(
            os_name=os_name if os_name is not None else family.value,
            family=family,
            home=home,
            private_root=home / PRIVATE_DIRECTORY_ROOTS[family.value],
        )

    @classmethod
    def detect(cls, os_name: Optional[str] = None,
               home: Optional[Union[str, Path]] = None) -> "SystemIdentity":
        """Build an identity from the environment, or from the given values"""
        if os_name is None:
            os_name = current_os_name()
        if home is None:
            home = Path.home()
        family = classify_os(os_name)
        logger.debug("Detected OS %r as %s", os_name, family.name)
        return cls.for_family(family, home, os_name=os_name)

    def private_directory_path(self, app_name: str) -> Path:
        """Compute the private directory for app_name without touching disk"""
        if self.family is OSFamily.OTHER:
            # No app-data convention, hide it in the home directory instead
            app_name = HIDDEN_PREFIX + app_name
        return self.private_root / app_name

    def ensure_private_directory(self, app_name: str) -> Path:
        """Create the private directory if needed and return it"""
        private_dir = self.private_directory_path(app_name)
        if private_dir.is_dir():
            return private_dir
        if private_dir.exists():
            raise DirectoryUnavailableError(private_dir, "path exists and is not a directory")

        try:
            private_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryUnavailableError(private_dir, str(e)) from e

        logger.info("Created private directory %s", private_dir)
        return private_dir

    def generate_private_directory(self, app_name: str) -> Optional[Path]:
        """
        Generate a private directory for an app.

        Returns the directory, which is guaranteed to exist, or None if it
        could not be created.
        """
        try:
            return self.ensure_private_directory(app_name)
        except DirectoryUnavailableError as e:
            logger.warning("%s", e)
            return None

    def get_private_file(self, app_name: str, file_name: str) -> Optional[Path]:
        """
        Return PRIVATE_ROOT/app_name/file_name, creating the directory.

        The file itself is not created. Returns None when the private
        directory is unavailable.
        """
        private_dir = self.generate_private_directory(app_name)
        if private_dir is None:
            return None
        return private_dir / file_name


@lru_cache(maxsize=None)
def get_system() -> SystemIdentity:
    """Return the process-wide system identity, detected on first use"""
    return SystemIdentity.detect()


def generate_private_directory(app_name: str) -> Optional[Path]:
    """Generate a private directory for app_name on the running system"""
    return get_system().generate_private_directory(app_name)


def get_private_file(app_name: str, file_name: str) -> Optional[Path]:
    """Return a file inside app_name's private directory on the running system"""
    return get_system().get_private_file(app_name, file_name)
