from pathlib import Path
from typing import Iterable, List, Union

from projmanip.logs import get_logger
from projmanip.manipulation.manipulator import Manipulator
from projmanip.manipulation.session import ManipulationSession
from projmanip.models import ManipulationConfig
from .dependencies_manipulator import NpmDependenciesManipulator
from .package import NpmPackage, NpmPackageImpl
from .version_manipulator import NpmPackageVersionManipulator

log = get_logger("npm.session")


class NpmManipulationSession(ManipulationSession):
    """Loads npm packages and configures the npm manipulators for one run."""

    def __init__(self, config: ManipulationConfig, manifest_paths: Iterable[Union[Path, str]]):
        self.config = config
        self.projects: List[NpmPackage] = [NpmPackageImpl(path) for path in manifest_paths]
        self.manipulators: List[Manipulator] = [
            NpmPackageVersionManipulator(config.version, config.available_versions),
            NpmDependenciesManipulator(config.dependencies.runtime, config.dependencies.development),
        ]
        log.debug(f"Session with {len(self.projects)} package(s)")

    def get_projects(self) -> List[NpmPackage]:
        return list(self.projects)

    def get_manipulators(self) -> List[Manipulator]:
        return list(self.manipulators)
