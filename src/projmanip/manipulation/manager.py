"""
ManipulationManager - orders and applies manipulators, then persists changed projects.
"""
from typing import Dict, List, Optional

from projmanip.logs import get_logger
from projmanip.recovery import DependencyCycleError
from .manipulator import Manipulator
from .project import Project
from .session import ManipulationSession

log = get_logger("manipulation.manager")


class ManipulationManager:
    """
    Runs every active manipulator exactly once, each after the manipulators it
    depends on, and persists the union of changed projects afterwards.

    Ordering is a fixed point over repeated rounds rather than a topological
    sort: dependencies name kinds, possibly provided by several manipulators, so
    a manipulator becomes eligible once nothing pending provides any kind it
    depends on. The order among manipulators eligible in the same round is not
    part of the contract.
    """

    def __init__(self):
        self.manipulators: List[Manipulator] = []
        self.changed: List[Project] = []

    def init(self, session: ManipulationSession):
        self.manipulators = session.get_active_manipulators()
        log.debug(f"Active manipulators: {self.manipulators}")

    def scan_and_apply(self, session: ManipulationSession,
                       manipulators: Optional[List[Manipulator]] = None):
        """
        Applies the manipulators to the session's projects and saves the changed ones.

        Args:
            session: Supplies the projects to manipulate.
            manipulators: Manipulators to run; defaults to the ones from init().

        Raises:
            DependencyCycleError: If some manipulators can never become eligible;
                nothing is saved in that case.
        """
        projects = session.get_projects()
        self.changed = self.apply_manipulations(projects, manipulators)
        self.process_changes(self.changed)

    def process_changes(self, changed: List[Project]):
        for project in changed:
            log.debug(f"Persisting {project!r}")
            project.update()

    def apply_manipulations(self, projects: List[Project],
                            manipulators: Optional[List[Manipulator]] = None) -> List[Project]:
        """
        Applies the manipulations, resolving their order from declared dependencies.

        Args:
            projects: The projects to apply the changes to.
            manipulators: Manipulators to run; defaults to the ones from init().

        Returns:
            The changed projects, each listed once, in the order first reported.

        Raises:
            DependencyCycleError: If some manipulators can never become eligible.
        """
        if manipulators is None:
            manipulators = self.manipulators

        changed: Dict[int, Project] = {}
        # The same instance listed twice still runs once
        todo = list({id(m): m for m in manipulators}.values())
        rounds = 0
        while todo:
            rounds += 1
            done = 0
            for manipulator in list(todo):
                if not self._dependencies_done(manipulator, todo):
                    continue

                log.debug(f"Round {rounds}: applying {manipulator!r}")
                for project in manipulator.apply_changes(projects) or ():
                    changed.setdefault(id(project), project)

                todo.remove(manipulator)
                done += 1

            if done == 0:
                break

        if todo:
            remaining = [m.kind for m in todo]
            log.error(f"Dependency cycle among manipulators: {remaining}")
            raise DependencyCycleError(remaining)

        if not changed:
            log.info("No changes.")
        else:
            log.info(f"{len(changed)} project(s) changed after {rounds} round(s)")

        return list(changed.values())

    @staticmethod
    def _dependencies_done(manipulator: Manipulator, todo: List[Manipulator]) -> bool:
        """True if no pending manipulator provides any kind the given one depends on."""
        dependencies = manipulator.get_dependencies()
        if not dependencies:
            return True
        return all(dependencies.isdisjoint(pending.get_kinds()) for pending in todo)
