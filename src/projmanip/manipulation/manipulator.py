import abc
from typing import FrozenSet, Iterable, List, Optional

from .project import Project


class Manipulator(abc.ABC):
    """
    An abstract base class for all manipulators.

    Each concrete manipulator declares a KIND identifying it, optionally a set of
    broader kinds it PROVIDES, and the kinds it DEPENDS_ON. A dependency is
    satisfied once no pending manipulator provides the named kind, so depending
    on a capability such as 'version' waits for every manipulator offering it.
    """
    KIND: Optional[str] = None
    PROVIDES: FrozenSet[str] = frozenset()
    DEPENDS_ON: FrozenSet[str] = frozenset()

    @property
    def kind(self) -> str:
        return self.KIND or type(self).__name__

    def get_kinds(self) -> FrozenSet[str]:
        """All kinds this manipulator satisfies, its own kind included."""
        return frozenset(self.PROVIDES) | {self.kind}

    def get_dependencies(self) -> FrozenSet[str]:
        """Kinds that have to finish before this manipulator may run."""
        return frozenset(self.DEPENDS_ON)

    def is_active(self) -> bool:
        """Whether the manipulator has anything to do with its configuration."""
        return True

    @abc.abstractmethod
    def apply_changes(self, projects: List[Project]) -> Optional[Iterable[Project]]:
        """
        Applies the manipulation to the given projects.

        Args:
            projects: Every project of the session.

        Returns:
            The projects that were changed. None and an empty collection both
            mean nothing changed.

        Raises:
            ManipulationError: If the manipulation cannot be performed.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind})"
