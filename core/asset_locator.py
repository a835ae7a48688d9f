"""
Package Asset Locator Module
Finds the stylesheet shipped inside an installed npm package.
"""

import logging
from pathlib import Path
from typing import Tuple, Union

from utils.file_utils import find_node_modules, read_file_content

logger = logging.getLogger(__name__)

# Checked in order, relative to node_modules/<package>
CSS_CANDIDATE_PATHS: Tuple[Tuple[str, ...], ...] = (
    ('index.css',),
    ('dist', 'index.css'),
    ('css', 'index.css'),
    ('styles', 'index.css'),
)


class AssetLocatorError(Exception):
    """Base class for failures to produce a package's CSS text."""

    def __init__(self, package_name: str, message: str):
        super().__init__(message)
        self.package_name = package_name


class AssetNotFound(AssetLocatorError):
    """The workspace, the package directory or its stylesheet is missing."""


class ReadFailure(AssetLocatorError):
    """A stylesheet was found but could not be read."""


def is_valid_package_name(package_name: str) -> bool:
    """Reject names that would resolve outside node_modules."""
    if not package_name or package_name.startswith(('/', '\\')) or Path(package_name).is_absolute():
        return False
    segments = package_name.replace('\\', '/').split('/')
    return '..' not in segments


class PackageAssetLocator:
    def __init__(self, candidate_paths: Tuple[Tuple[str, ...], ...] = CSS_CANDIDATE_PATHS):
        self.candidate_paths = candidate_paths

    def package_path(self, package_name: str, project_root: Union[str, Path, None]) -> Path:
        """Return the installed location of a package, raising AssetNotFound if absent."""
        node_modules = find_node_modules(project_root)
        if node_modules is None:
            raise AssetNotFound(package_name, "No workspace folder found")
        if not is_valid_package_name(package_name):
            raise AssetNotFound(package_name, f"Invalid package name {package_name}")

        package_path = node_modules / package_name
        if not package_path.exists():
            raise AssetNotFound(package_name, f"Package {package_name} not found in node_modules")
        return package_path

    def find_css_path(self, package_name: str, project_root: Union[str, Path, None]) -> Path:
        """Return the first existing candidate stylesheet of the package."""
        package_path = self.package_path(package_name, project_root)
        for parts in self.candidate_paths:
            css_path = package_path.joinpath(*parts)
            if css_path.is_file():
                return css_path
        raise AssetNotFound(package_name, f"No CSS file found in {package_name}")

    def locate(self, package_name: str, project_root: Union[str, Path, None]) -> str:
        """
        Read the CSS text shipped with a package.

        Raises:
            AssetNotFound: No workspace, package directory or candidate stylesheet
            ReadFailure: The stylesheet exists but reading it failed
        """
        css_path = self.find_css_path(package_name, project_root)
        logger.info(f"Reading CSS from: {css_path}")
        try:
            return read_file_content(css_path)
        except (OSError, UnicodeDecodeError) as e:
            raise ReadFailure(package_name, f"Error reading package {package_name}: {e}") from e
