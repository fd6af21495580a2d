"""
Shared fixtures.

The fake provider runs in-process on a random port, so no test touches the
network beyond localhost.
"""

import pytest
import pytest_asyncio
from aiohttp.test_utils import TestServer

from translator.libretranslate import LibreTranslateTranslator
from tests.fixtures import FakeLibreTranslate, FakeTranslator, RecordingSleep


@pytest.fixture
def fake_provider():
    return FakeLibreTranslate()


@pytest_asyncio.fixture
async def provider_url(fake_provider):
    server = TestServer(fake_provider.build_app())
    await server.start_server()
    try:
        yield str(server.make_url("/")).rstrip("/")
    finally:
        await server.close()


@pytest.fixture
def recording_sleep(fake_provider):
    return RecordingSleep(snapshot=lambda: len(fake_provider.requests))


@pytest_asyncio.fixture
async def translator(provider_url, recording_sleep):
    client = LibreTranslateTranslator(base_url=provider_url, sleep=recording_sleep)
    try:
        yield client
    finally:
        await client.close()


@pytest.fixture
def fake_translator():
    return FakeTranslator(sleep=RecordingSleep())
