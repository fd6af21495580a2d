from .fake_provider import UNREACHABLE_URL, FakeLibreTranslate
from .mocks import FakeTranslator, RecordingSleep

__all__ = [
    "FakeLibreTranslate",
    "UNREACHABLE_URL",
    "FakeTranslator",
    "RecordingSleep",
]
