"""Go Fiber Framework Adapter."""
from typing import FrozenSet, Optional

from ..base import FrameworkAdapter
from ..registry import AnalyzerRegistry
from ...models import FrameworkKind


@AnalyzerRegistry.register_framework(FrameworkKind.FIBER)
class FiberAdapter(FrameworkAdapter):
    """
    Fiber uses capitalised verbs (``app.Get``). Any spelling of the verb
    is accepted and the method is reported upper-cased.
    """

    HTTP_METHODS: FrozenSet[str] = frozenset({'get', 'post', 'put', 'delete', 'patch', 'options'})

    @property
    def name(self) -> str:
        return "fiber_adapter"

    @property
    def framework(self) -> FrameworkKind:
        return FrameworkKind.FIBER

    def method_for(self, member: str) -> Optional[str]:
        if member.lower() in self.HTTP_METHODS:
            return member.upper()
        return None
