class ManipulationError(Exception):
    """Base exception for all manipulation errors."""
    pass

class DependencyCycleError(ManipulationError):
    """Manipulators left unscheduled because their dependencies never completed."""

    def __init__(self, remaining):
        self.remaining = sorted(remaining)
        super().__init__(
            "A dependency cycle has been found, so manipulation cannot be finished. "
            f"Remaining manipulators are: {', '.join(self.remaining)}"
        )

class VersionGenerationError(ManipulationError):
    """A new version could not be generated from the given inputs."""
    pass

class ConfigurationError(ManipulationError):
    """Configuration file or command line values are invalid."""
    pass

class ManifestError(ManipulationError):
    """Project manifest is malformed - from syntax errors to unexpected field types."""
    pass

class FileOperationError(ManipulationError):
    """A file could not be read or written."""
    pass
