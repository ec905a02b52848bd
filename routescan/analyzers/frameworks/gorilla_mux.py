"""Gorilla Mux Router Adapter."""
from typing import Optional

from ..base import FrameworkAdapter
from ..registry import AnalyzerRegistry
from ...models import FrameworkKind


@AnalyzerRegistry.register_framework(FrameworkKind.GORILLA_MUX)
class GorillaMuxAdapter(FrameworkAdapter):
    """
    Gorilla Mux routes are declared with ``r.HandleFunc(path, handler)``.

    The verb is attached afterwards through ``.Methods(...)`` on the
    returned route, so the method is reported as CUSTOM.
    """

    REGISTRATION_MEMBER = 'HandleFunc'
    METHOD = 'CUSTOM'

    @property
    def name(self) -> str:
        return "gorilla_mux_adapter"

    @property
    def framework(self) -> FrameworkKind:
        return FrameworkKind.GORILLA_MUX

    def method_for(self, member: str) -> Optional[str]:
        if member == self.REGISTRATION_MEMBER:
            return self.METHOD
        return None
