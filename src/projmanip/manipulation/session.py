import abc
from typing import List

from .manipulator import Manipulator
from .project import Project


class ManipulationSession(abc.ABC):
    """Supplies the projects and the resolved active manipulators of one run."""

    @abc.abstractmethod
    def get_projects(self) -> List[Project]:
        pass

    @abc.abstractmethod
    def get_manipulators(self) -> List[Manipulator]:
        """Every configured manipulator, active or not, in registration order."""
        pass

    def get_active_manipulators(self) -> List[Manipulator]:
        return [m for m in self.get_manipulators() if m.is_active()]
