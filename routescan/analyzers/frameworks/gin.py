"""Go Gin Framework Adapter."""
from typing import FrozenSet, Optional

from ..base import FrameworkAdapter
from ..registry import AnalyzerRegistry
from ...models import FrameworkKind


@AnalyzerRegistry.register_framework(FrameworkKind.GIN)
class GinAdapter(FrameworkAdapter):
    """
    Gin registers routes through upper-case verb methods on an engine or
    group: ``r.GET("/users", listUsers)``. Matching is case-sensitive.
    """

    HTTP_METHODS: FrozenSet[str] = frozenset({'GET', 'POST', 'PUT', 'DELETE', 'PATCH', 'OPTIONS'})

    @property
    def name(self) -> str:
        return "gin_adapter"

    @property
    def framework(self) -> FrameworkKind:
        return FrameworkKind.GIN

    def method_for(self, member: str) -> Optional[str]:
        if member in self.HTTP_METHODS:
            return member
        return None
