"""Go standard library net/http Adapter."""
from typing import Dict, Optional

from ..base import FrameworkAdapter
from ..registry import AnalyzerRegistry
from ...models import FrameworkKind


@AnalyzerRegistry.register_framework(FrameworkKind.NET_HTTP)
class NetHTTPAdapter(FrameworkAdapter):
    """
    ServeMux registrations, on the package (``http.HandleFunc``) or on a
    mux value (``mux.Handle``).

    HandleFunc serves every method under the pattern (ALL); Handle takes
    a caller-supplied http.Handler (CUSTOM).
    """

    MEMBER_METHODS: Dict[str, str] = {
        'HandleFunc': 'ALL',
        'Handle': 'CUSTOM',
    }

    @property
    def name(self) -> str:
        return "nethttp_adapter"

    @property
    def framework(self) -> FrameworkKind:
        return FrameworkKind.NET_HTTP

    def method_for(self, member: str) -> Optional[str]:
        return self.MEMBER_METHODS.get(member)
