"""Realtime delivery infrastructure providers."""

from dishka import Scope, provide

from stackit.adapter.realtime import LocalConnectionDirectory
from stackit.domain.service import ConnectionDirectory
from stackit.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Realtime component base."""

    __mock_component__ = "realtime"


class ProdRealtimeProvider(RealtimeProvider):
    """Production realtime provider keeping connections in process memory."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_connection_directory(self) -> ConnectionDirectory:
        """Provide the process-wide connection directory."""
        return LocalConnectionDirectory()
