from typing import Dict, List, Optional

from projmanip.logs import get_logger
from projmanip.manipulation.manipulator import Manipulator
from projmanip.manipulation.project import Project
from .package import NpmPackage

log = get_logger("npm.dependencies")


class NpmDependenciesManipulator(Manipulator):
    """
    Forces user supplied versions onto dependencies already declared by npm packages.

    Overrides for dependencies a package does not declare are ignored; nothing
    is ever added to a manifest. Runs after the version manipulators, so a
    package's own version is final by the time its dependencies are rewritten.
    """
    KIND = "npm-dependencies"
    PROVIDES = frozenset({"dependencies"})
    DEPENDS_ON = frozenset({"version"})

    def __init__(self, dependencies: Optional[Dict[str, str]] = None,
                 dev_dependencies: Optional[Dict[str, str]] = None):
        self.dependencies = dict(dependencies or {})
        self.dev_dependencies = dict(dev_dependencies or {})

    def is_active(self) -> bool:
        return bool(self.dependencies or self.dev_dependencies)

    def apply_changes(self, projects: List[Project]) -> List[Project]:
        changed = []
        for project in projects:
            if not isinstance(project, NpmPackage):
                continue

            runtime = self._override(project, project.get_dependencies(), self.dependencies, False)
            development = self._override(project, project.get_dev_dependencies(), self.dev_dependencies, True)
            if runtime or development:
                changed.append(project)

        return changed

    def _override(self, package: NpmPackage, declared: Dict[str, str],
                  overrides: Dict[str, str], is_development: bool) -> bool:
        scope = "devDependencies" if is_development else "dependencies"
        modified = False
        for name, version in overrides.items():
            if name not in declared:
                continue
            if declared[name] == version:
                continue
            log.info(f"{package.get_name()}: {scope} {name} {declared[name]} -> {version}")
            package.set_dependency_version(name, version, is_development)
            modified = True
        return modified
