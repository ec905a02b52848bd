"""Go Echo Framework Adapter."""
from typing import FrozenSet, Optional

from ..base import FrameworkAdapter
from ..registry import AnalyzerRegistry
from ...models import FrameworkKind


@AnalyzerRegistry.register_framework(FrameworkKind.ECHO)
class EchoAdapter(FrameworkAdapter):
    """Echo: ``e.GET("/users/:id", getUser)``. Verb names are case-sensitive."""

    HTTP_METHODS: FrozenSet[str] = frozenset({'GET', 'POST', 'PUT', 'DELETE', 'PATCH', 'OPTIONS'})

    @property
    def name(self) -> str:
        return "echo_adapter"

    @property
    def framework(self) -> FrameworkKind:
        return FrameworkKind.ECHO

    def method_for(self, member: str) -> Optional[str]:
        return member if member in self.HTTP_METHODS else None
