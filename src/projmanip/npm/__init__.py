"""
npm support: package.json projects, the npm manipulators and their session.
"""

from .package import NpmPackage, NpmPackageImpl
from .versioning import VersionSuffixGenerator, get_new_version
from .version_manipulator import NpmPackageVersionManipulator
from .dependencies_manipulator import NpmDependenciesManipulator
from .session import NpmManipulationSession

__all__ = [
    'NpmPackage',
    'NpmPackageImpl',
    'VersionSuffixGenerator',
    'get_new_version',
    'NpmPackageVersionManipulator',
    'NpmDependenciesManipulator',
    'NpmManipulationSession'
]
