"""
Catalog Store Module
Holds the active package and its class catalog for the session.

The catalog is rebuilt wholesale on every load and published with a single
reference swap, so readers see either the previous catalog or the new one.
"""

import threading
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Union

from .asset_locator import AssetLocatorError, PackageAssetLocator
from .css_class_extractor import EMPTY_CATALOG, ClassCatalog, extract_class_definitions
from .settings import DEFAULT_PACKAGE

logger = logging.getLogger(__name__)

INFO = 'info'
ERROR = 'error'

@dataclass(frozen=True)
class Notification:
    level: str
    message: str

    def to_dict(self) -> dict:
        return {'level': self.level, 'message': self.message}

Notifier = Callable[[Notification], None]


class CatalogStore:
    """Single-writer cell for the package selection and its ClassCatalog."""

    def __init__(self,
                 project_root: Union[str, Path, None],
                 package_name: str = DEFAULT_PACKAGE,
                 locator: Optional[PackageAssetLocator] = None,
                 notifier: Optional[Notifier] = None):
        self.project_root = project_root
        self.locator = locator or PackageAssetLocator()
        self.notifier = notifier
        self._package_name = package_name
        self._catalog: ClassCatalog = EMPTY_CATALOG
        self._write_lock = threading.Lock()

    @property
    def package_name(self) -> str:
        return self._package_name

    @property
    def catalog(self) -> ClassCatalog:
        """Snapshot of the currently published catalog."""
        return self._catalog

    def _notify(self, level: str, message: str, sink: List[Notification]) -> None:
        notification = Notification(level, message)
        sink.append(notification)
        if level == ERROR:
            logger.warning(message)
        else:
            logger.info(message)
        if self.notifier is not None:
            self.notifier(notification)

    def read_package_css(self, package_name: str, sink: List[Notification]) -> ClassCatalog:
        """Locate and extract a package's classes; missing or unreadable CSS gives an empty catalog."""
        try:
            css_content = self.locator.locate(package_name, self.project_root)
        except AssetLocatorError as e:
            self._notify(ERROR, str(e), sink)
            return EMPTY_CATALOG

        definitions = extract_class_definitions(css_content)
        logger.info(f"Found {len(definitions)} classes")
        return definitions

    def load(self, package_name: Optional[str] = None) -> List[Notification]:
        """
        Rebuild the catalog for a package and publish it.

        Args:
            package_name: Package to switch to; defaults to the active package

        Returns:
            Notifications raised while loading, in order
        """
        package_name = package_name or self._package_name
        notifications: List[Notification] = []

        with self._write_lock:
            self._package_name = package_name
            self._notify(INFO, f"Scanning {package_name} for CSS classes...", notifications)
            try:
                catalog = self.read_package_css(package_name, notifications)
            except Exception as e:
                logger.error(f"Unexpected error loading {package_name}", exc_info=True)
                self._notify(ERROR, f"Failed to load classes from {package_name}: {e}", notifications)
                return notifications

            self._catalog = catalog
            self._notify(INFO, f"Loaded {len(catalog)} classes from {package_name}", notifications)

        return notifications

    def set_package(self, package_name: str) -> List[Notification]:
        """Switch the active package and reload. Blank names are ignored."""
        if not package_name or not package_name.strip():
            return []
        return self.load(package_name.strip())
