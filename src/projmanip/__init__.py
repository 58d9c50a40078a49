"""
projmanip - build-time manipulation of project manifests.

Manipulators rewrite loaded projects (version suffixes, dependency overrides);
the ManipulationManager runs them in dependency order and saves what changed.
"""

from .version import VERSION
from .recovery import (
    ManipulationError,
    DependencyCycleError,
    VersionGenerationError,
    ConfigurationError,
    ManifestError,
    FileOperationError,
)
from .models import VersionOptions, DependencyOverrides, ManipulationConfig
from .manipulation import Project, Manipulator, ManipulationSession, ManipulationManager

__version__ = VERSION

__all__ = [
    "VERSION",
    "ManipulationError",
    "DependencyCycleError",
    "VersionGenerationError",
    "ConfigurationError",
    "ManifestError",
    "FileOperationError",
    "VersionOptions",
    "DependencyOverrides",
    "ManipulationConfig",
    "Project",
    "Manipulator",
    "ManipulationSession",
    "ManipulationManager",
]
