"""
Manipulation submodule: the plugin interfaces and the manager ordering them.
"""

from .project import Project
from .manipulator import Manipulator
from .session import ManipulationSession
from .manager import ManipulationManager

__all__ = [
    'Project',
    'Manipulator',
    'ManipulationSession',
    'ManipulationManager'
]
