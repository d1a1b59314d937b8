"""Mock providers for testing."""

from .container import build_test_container
from .persistence import MockPersistenceProvider
from .realtime import MockRealtimeProvider, RecordingConnectionDirectory

__all__ = [
    "MockPersistenceProvider",
    "MockRealtimeProvider",
    "RecordingConnectionDirectory",
    "build_test_container",
]
