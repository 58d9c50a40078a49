"""
npm packages as manipulable projects.

NpmPackage adds the dependency accessors the npm manipulators need on top of the
generic Project interface. NpmPackageImpl is backed by a package.json file: it
keeps the parsed document as-is, so fields no manipulator knows about survive an
update unchanged.
"""
import abc
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from projmanip.logs import get_logger
from projmanip.manipulation.project import Project
from projmanip.models import PackageManifest
from projmanip.recovery import FileOperationError, ManifestError
from .io import atomic_write, load_json_file

log = get_logger("npm.package")

PACKAGE_JSON = "package.json"
RUNTIME_SECTION = "dependencies"
DEVELOPMENT_SECTION = "devDependencies"


class NpmPackage(Project):
    """A Project described by an npm manifest."""

    @abc.abstractmethod
    def get_dependencies(self) -> Dict[str, str]:
        pass

    @abc.abstractmethod
    def get_dev_dependencies(self) -> Dict[str, str]:
        pass

    @abc.abstractmethod
    def set_dependency_version(self, dependency_name: str, version: str, is_development: bool) -> None:
        """Sets the version of an existing dependency in the runtime or development section."""
        pass


class NpmPackageImpl(NpmPackage):
    """An npm package loaded from a package.json file."""

    def __init__(self, path: Union[Path, str]):
        path = Path(path)
        if path.is_dir():
            path = path / PACKAGE_JSON
        self.path = path
        self._data = self._load(path)

    @staticmethod
    def _load(path: Path) -> Dict[str, Any]:
        data = load_json_file(path)
        if data is None:
            raise FileOperationError(f"Manifest not found: {path}")

        try:
            PackageManifest.model_validate(data)
        except ValidationError as e:
            raise ManifestError(f"Invalid npm manifest {path}: {e}") from e

        log.debug(f"Loaded {data['name']}@{data['version']} from {path}")
        return data

    def update(self) -> None:
        atomic_write(self.path, self._data)
        log.info(f"Updated {self.path}")

    def get_name(self) -> str:
        return self._get_string("name")

    def get_version(self) -> str:
        return self._get_string("version")

    def set_version(self, version: str) -> None:
        self._data["version"] = version

    def get_dependencies(self) -> Dict[str, str]:
        return dict(self._get_section(RUNTIME_SECTION))

    def get_dev_dependencies(self) -> Dict[str, str]:
        return dict(self._get_section(DEVELOPMENT_SECTION))

    def set_dependency_version(self, dependency_name: str, version: str, is_development: bool) -> None:
        section = DEVELOPMENT_SECTION if is_development else RUNTIME_SECTION
        dependencies = self._get_section(section)
        if dependency_name not in dependencies:
            raise ManifestError(f"{self.path} has no {section} entry named '{dependency_name}'")
        dependencies[dependency_name] = version

    def _get_string(self, key: str) -> str:
        value = self._data.get(key)
        if not isinstance(value, str):
            raise ManifestError(f"Field '{key}' of {self.path} is not a string: {value!r}")
        return value

    def _get_section(self, key: str) -> Dict[str, str]:
        section = self._data.get(key)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ManifestError(f"Section '{key}' of {self.path} is not an object")
        return section

    def __repr__(self) -> str:
        return f"NpmPackageImpl({self.path})"
