"""
Adapter Registry for routescan.

Maps each FrameworkKind to the adapter that extracts its endpoints.
Adding a framework means registering one more adapter class; the
detector and the dispatcher never change.
"""

from typing import Callable, Dict, List, Optional, Type
import logging

from .base import FrameworkAdapter
from ..models import FrameworkKind

logger = logging.getLogger(__name__)


class AnalyzerRegistry:
    """
    Central registry for framework adapters.

    Provides:
    - Decorator-based registration
    - Adapter lookup by detected framework
    """

    _framework_adapters: Dict[FrameworkKind, Type[FrameworkAdapter]] = {}

    @classmethod
    def register_framework(cls, kind: FrameworkKind) -> Callable:
        """
        Decorator to register a framework adapter.

        Usage:
            @AnalyzerRegistry.register_framework(FrameworkKind.GIN)
            class GinAdapter(FrameworkAdapter):
                ...

        Args:
            kind: Framework the adapter serves

        Returns:
            Decorator function
        """
        if kind is FrameworkKind.UNKNOWN:
            raise ValueError("Cannot register an adapter for the Unknown framework")

        def decorator(adapter_class: Type[FrameworkAdapter]) -> Type[FrameworkAdapter]:
            cls._framework_adapters[kind] = adapter_class
            logger.debug(f"Registered framework adapter: {adapter_class.__name__} for {kind.value}")
            return adapter_class
        return decorator

    @classmethod
    def get_adapter(cls, kind: FrameworkKind) -> Optional[FrameworkAdapter]:
        """
        Get an adapter instance for the given framework.

        Args:
            kind: Detected framework

        Returns:
            FrameworkAdapter instance or None
        """
        adapter_class = cls._framework_adapters.get(kind)
        if adapter_class:
            return adapter_class()
        return None

    @classmethod
    def get_all_adapters(cls) -> List[FrameworkAdapter]:
        """Get instances of all registered adapters."""
        return [adapter_class() for adapter_class in cls._framework_adapters.values()]

    @classmethod
    def get_supported_frameworks(cls) -> List[FrameworkKind]:
        """Get frameworks that have a registered adapter."""
        return sorted(cls._framework_adapters.keys(), key=lambda k: k.value.lower())

    @classmethod
    def stats(cls) -> Dict[str, int]:
        """Get registration statistics."""
        return {'framework_adapters': len(cls._framework_adapters)}


def get_adapter(kind: FrameworkKind) -> Optional[FrameworkAdapter]:
    """Get the adapter registered for a framework."""
    return AnalyzerRegistry.get_adapter(kind)
