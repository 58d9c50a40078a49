import abc


class Project(abc.ABC):
    """
    An abstract base class for a single buildable unit loaded in memory.

    Implementations own their backing store; manipulators only change the
    in-memory state and the manager asks changed projects to persist it.
    """

    @abc.abstractmethod
    def update(self) -> None:
        """
        Persists the current in-memory state to the backing store.

        Raises:
            ManipulationError: If the state cannot be written.
        """
        pass

    @abc.abstractmethod
    def get_name(self) -> str:
        pass

    @abc.abstractmethod
    def get_version(self) -> str:
        pass

    @abc.abstractmethod
    def set_version(self, version: str) -> None:
        pass
