from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List, Dict
import re

LABEL_PATTERN = re.compile(r"^[0-9A-Za-z.]+(?:-[0-9A-Za-z.]+)*$")

class VersionOptions(BaseModel):
    """Options driving generation of build-qualified versions."""

    model_config = ConfigDict(extra='forbid')

    incremental_suffix: Optional[str] = Field(
        default=None,
        description="Qualifier label appended to the base version, such as redhat or jboss"
    )
    padding: int = Field(default=5, ge=1, description="Zero-pad width of the incremental number")
    suffix_override: Optional[str] = Field(
        default=None,
        description="Label used instead of incremental_suffix when set"
    )
    override: Optional[str] = Field(
        default=None,
        description="Complete version returned verbatim, ignoring every other option"
    )

    @field_validator('incremental_suffix', 'suffix_override')
    @classmethod
    def validate_label(cls, v):
        if v is not None and not LABEL_PATTERN.match(v):
            raise ValueError(f"Invalid version suffix: {v}")
        return v

    @field_validator('override')
    @classmethod
    def validate_override(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Version override must not be blank")
        return v

    @property
    def label(self) -> Optional[str]:
        """The label actually used for suffixing; the override wins."""
        return self.suffix_override or self.incremental_suffix

class DependencyOverrides(BaseModel):
    """User supplied dependency versions, per dependency scope."""

    model_config = ConfigDict(extra='forbid')

    runtime: Dict[str, str] = Field(
        default_factory=dict,
        description="Versions forced onto entries of the dependencies section"
    )
    development: Dict[str, str] = Field(
        default_factory=dict,
        description="Versions forced onto entries of the devDependencies section"
    )

    def is_empty(self) -> bool:
        return not self.runtime and not self.development

class ManipulationConfig(BaseModel):
    """Complete configuration of one manipulation run."""

    model_config = ConfigDict(extra='forbid')

    version: VersionOptions = Field(default_factory=VersionOptions)
    dependencies: DependencyOverrides = Field(default_factory=DependencyOverrides)
    available_versions: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Versions already used per package name; new suffixes are chosen above them"
    )

class PackageManifest(BaseModel):
    """The package.json fields the manipulators read and write."""

    model_config = ConfigDict(extra='allow', populate_by_name=True)

    name: str = Field(description="Package name")
    version: str = Field(description="Package version")
    dependencies: Dict[str, str] = Field(default_factory=dict)
    dev_dependencies: Dict[str, str] = Field(default_factory=dict, alias="devDependencies")

    @field_validator('name', 'version')
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError("must not be blank")
        return v

class ProjectResult(BaseModel):
    """Final state of a single project after manipulation."""

    name: str = Field(description="Package name")
    version: str = Field(description="Package version after manipulation")
    path: Optional[str] = Field(default=None, description="Manifest location")

class ManipulationResult(BaseModel):
    """Report written after a run for the build system to pick up."""

    projects: List[ProjectResult] = Field(default_factory=list)
    changed: List[str] = Field(default_factory=list, description="Names of the persisted projects")

    @model_validator(mode='after')
    def validate_changed(self):
        known = {p.name for p in self.projects}
        unknown = [name for name in self.changed if name not in known]
        if unknown:
            raise ValueError(f"changed projects missing from report: {unknown}")
        return self
