"""
Build-qualified version generation.

A rebuilt artifact gets the version <base>-<label>-<number>, e.g.
1.0.0-redhat-00003. The number is one above the highest number already used
for the same base and label, so the pool of used versions decides the result
and any qualifier the current version carries is thrown away.
"""
import re
from typing import Iterable, Optional

from projmanip.models import VersionOptions
from projmanip.recovery import VersionGenerationError

BASE_VERSION_PATTERN = re.compile(r'^v?([0-9]+(?:\.[0-9]+)*)')


class VersionSuffixGenerator:
    """Computes the next unused suffixed version, or returns a configured override."""

    def __init__(self, suffix: Optional[str], padding: int = 5,
                 suffix_override: Optional[str] = None, version_override: Optional[str] = None):
        if padding < 1:
            raise VersionGenerationError(f"Incremental padding must be positive, got {padding}")
        self.suffix = suffix
        self.padding = padding
        self.suffix_override = suffix_override
        self.version_override = version_override

    @classmethod
    def from_options(cls, options: VersionOptions) -> 'VersionSuffixGenerator':
        return cls(options.incremental_suffix, options.padding,
                   options.suffix_override, options.override)

    @property
    def label(self) -> Optional[str]:
        return self.suffix_override or self.suffix

    def get_new_version(self, current_version: str, available_versions: Iterable[str]) -> str:
        """
        Returns the version a rebuild of current_version should get.

        Args:
            current_version: The version in the manifest, possibly already suffixed.
            available_versions: Versions already used; entries not matching the
                base and label are ignored.

        Returns:
            The full override when configured, otherwise the next suffixed version.

        Raises:
            VersionGenerationError: If no label is configured, the current version
                has no numeric core, or the next number does not fit the padding.
        """
        if self.version_override:
            return self.version_override
        return self.generate_new_version(current_version, available_versions)

    def generate_new_version(self, current_version: str, available_versions: Iterable[str]) -> str:
        label = self.label
        if not label:
            raise VersionGenerationError("No version suffix configured")

        base = self.strip_qualifier(current_version)
        number = self.find_highest_incremental_num(base, available_versions) + 1
        digits = str(number).zfill(self.padding)
        if len(digits) > self.padding:
            raise VersionGenerationError(
                f"Incremental number {number} for {base}-{label} does not fit in {self.padding} digits"
            )
        return f"{base}-{label}-{digits}"

    def find_highest_incremental_num(self, base_version: str, available_versions: Iterable[str]) -> int:
        """Highest number used with base_version and the effective label; 0 if none."""
        pattern = re.compile(rf'{re.escape(base_version)}-{re.escape(self.label or "")}-([0-9]+)')
        highest = 0
        for candidate in available_versions or ():
            if not isinstance(candidate, str):
                continue
            match = pattern.fullmatch(candidate)
            if match:
                highest = max(highest, int(match.group(1)))
        return highest

    @staticmethod
    def strip_qualifier(version: str) -> str:
        """Returns the numeric core of a version, dropping any qualifier or build metadata."""
        match = BASE_VERSION_PATTERN.match(version.strip()) if isinstance(version, str) else None
        if not match:
            raise VersionGenerationError(f"Version '{version}' has no numeric core")
        return match.group(1)


def get_new_version(current_version: str, available_versions: Iterable[str], options: VersionOptions) -> str:
    """Shortcut for VersionSuffixGenerator.from_options(options).get_new_version(...)."""
    return VersionSuffixGenerator.from_options(options).get_new_version(current_version, available_versions)
