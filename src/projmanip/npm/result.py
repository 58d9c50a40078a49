from pathlib import Path
from typing import Iterable, Union

from projmanip.models import ManipulationResult, ProjectResult
from .io import atomic_write
from .package import NpmPackage


def build_result(projects: Iterable[NpmPackage], changed: Iterable[NpmPackage]) -> ManipulationResult:
    """Describes the final name and version of every package."""
    entries = []
    for project in projects:
        path = getattr(project, "path", None)
        entries.append(ProjectResult(
            name=project.get_name(),
            version=project.get_version(),
            path=str(path) if path is not None else None,
        ))
    return ManipulationResult(projects=entries, changed=[p.get_name() for p in changed])


def write_result(result: ManipulationResult, file_path: Union[Path, str]) -> None:
    atomic_write(file_path, result.model_dump(mode="json"), create_dirs=True)
