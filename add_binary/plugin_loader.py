"""
Plugin loader for conversion strategies.

Scans the operations package and loads every valid strategy plugin.
"""

import importlib
import inspect
import pkgutil
from types import ModuleType
from typing import Any, Dict, List, Optional

from . import operations as operations_package
from .core.exceptions import UnknownStrategy
from .core.logging import get_logger
from .operations.base import BinaryOperation

logger = get_logger(__name__)


class PluginLoader:
    """Dynamically loads and manages conversion strategy plugins."""

    def __init__(self, package: ModuleType = operations_package):
        self.package = package
        self.operations: Dict[str, BinaryOperation] = {}
        self._loaded = False

    def load_operations(self) -> Dict[str, BinaryOperation]:
        """
        Load all strategy plugins from the operations package.

        Returns:
            Dictionary mapping strategy names to strategy instances
        """
        if self._loaded:
            return self.operations

        logger.info("Loading operations", package=self.package.__name__)

        module_names = sorted(
            info.name for info in pkgutil.iter_modules(self.package.__path__)
            if info.name != "base"
        )

        for module_name in module_names:
            try:
                operation = self._load_operation_module(module_name)
            except Exception as e:
                logger.error(
                    "Failed to load operation module", module=module_name, error=str(e), exc_info=True
                )
                continue

            if operation is None:
                continue

            if operation.name != module_name:
                logger.warning(
                    "Operation name mismatch", module=module_name, operation=operation.name
                )
            self.operations[operation.name] = operation
            logger.debug("Loaded operation", operation=operation.name)

        self._loaded = True
        logger.info("Loaded operations", count=len(self.operations), names=list(self.operations))
        return self.operations

    def _load_operation_module(self, module_name: str) -> Optional[BinaryOperation]:
        """
        Import a single strategy module and instantiate its strategy class.

        Args:
            module_name: Module name inside the operations package

        Returns:
            Strategy instance or None if the module defines none
        """
        module = importlib.import_module(f"{self.package.__name__}.{module_name}")

        for _, attr in inspect.getmembers(module, inspect.isclass):
            if (issubclass(attr, BinaryOperation)
                    and attr is not BinaryOperation
                    and not inspect.isabstract(attr)
                    and attr.__module__ == module.__name__):
                return attr()

        logger.error("No BinaryOperation class found", module=module_name)
        return None

    def get_operation(self, name: str) -> BinaryOperation:
        """
        Get strategy by name.

        Raises:
            UnknownStrategy: If the strategy is not registered
        """
        if not self._loaded:
            self.load_operations()

        if name not in self.operations:
            raise UnknownStrategy(name, list(self.operations.keys()))

        return self.operations[name]

    def get_operation_names(self) -> List[str]:
        """Get list of all available strategy names."""
        if not self._loaded:
            self.load_operations()

        return list(self.operations.keys())

    def get_operations_metadata(self) -> List[Dict[str, Any]]:
        """Get metadata for all loaded strategies."""
        if not self._loaded:
            self.load_operations()

        return [op.get_metadata() for op in self.operations.values()]

    def reload_operations(self) -> Dict[str, BinaryOperation]:
        """Reload all strategies."""
        self.operations.clear()
        self._loaded = False
        return self.load_operations()


# Global plugin loader instance
plugin_loader = PluginLoader()
