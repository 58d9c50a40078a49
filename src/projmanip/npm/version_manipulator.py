from typing import Dict, Iterable, List, Optional, Set

from projmanip.logs import get_logger
from projmanip.manipulation.manipulator import Manipulator
from projmanip.manipulation.project import Project
from projmanip.models import VersionOptions
from .package import NpmPackage
from .versioning import VersionSuffixGenerator

log = get_logger("npm.version")


class NpmPackageVersionManipulator(Manipulator):
    """Gives every npm package a new build-qualified version."""
    KIND = "npm-package-version"
    PROVIDES = frozenset({"version"})

    def __init__(self, options: VersionOptions,
                 available_versions: Optional[Dict[str, Iterable[str]]] = None):
        self.options = options
        self.available_versions = available_versions or {}
        self.generator = VersionSuffixGenerator.from_options(options)

    def is_active(self) -> bool:
        return bool(self.options.override or self.options.label)

    def get_available_versions(self, package_name: str) -> Set[str]:
        return set(self.available_versions.get(package_name, ()))

    def apply_changes(self, projects: List[Project]) -> List[Project]:
        changed = []
        for project in projects:
            if not isinstance(project, NpmPackage):
                continue

            name = project.get_name()
            current = project.get_version()
            new_version = self.generator.get_new_version(current, self.get_available_versions(name))
            if new_version == current:
                log.debug(f"{name} already at {current}")
                continue

            log.info(f"Changing version of {name} from {current} to {new_version}")
            project.set_version(new_version)
            changed.append(project)

        return changed
