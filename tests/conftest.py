"""
Shared fixtures: scripted poem services, a gated ingestor and a service factory.

Gated fakes hold each call open until the test resolves it, which lets a
test decide the order in which overlapping requests complete.
"""
import asyncio
import io

import pytest
from PIL import Image

from poem_studio.adapters import ImageIngestor, RecordingNotifier
from poem_studio.config import PoemStudioConfig
from poem_studio.models import UploadedFile
from poem_studio.schemas import AdjustedPoem, GeneratedPoem
from poem_studio.service import PoemStudioService


class PendingCall:
    """One in-flight fake request."""

    def __init__(self, args):
        self.args = args
        self._event = asyncio.Event()
        self._result = None
        self._error = None

    def resolve(self, result):
        self._result = result
        self._event.set()

    def fail(self, error):
        self._error = error
        self._event.set()

    async def wait(self):
        await self._event.wait()
        if self._error is not None:
            raise self._error
        return self._result


class FakeGenerator:
    def __init__(self, poems=None, error=None, gated=False):
        self.calls = []
        self._poems = list(poems or [])
        self._error = error
        self._gated = gated

    async def generate(self, image_payload, style):
        call = PendingCall((image_payload, style))
        self.calls.append(call)
        if self._gated:
            return GeneratedPoem(poem=await call.wait())
        if self._error is not None:
            raise self._error
        poem = self._poems.pop(0) if self._poems else f"Poem {len(self.calls)} in {style}"
        return GeneratedPoem(poem=poem)


class FakeAdjuster:
    def __init__(self, error=None, gated=False):
        self.calls = []
        self._error = error
        self._gated = gated

    async def adjust(self, poem, style):
        call = PendingCall((poem, style))
        self.calls.append(call)
        if self._gated:
            return AdjustedPoem(adjusted_poem=await call.wait())
        if self._error is not None:
            raise self._error
        return AdjustedPoem(adjusted_poem=f"[{style}] {poem}")


class GatedIngestor(ImageIngestor):
    """Real decoding, released one upload at a time by the test."""

    def __init__(self):
        self.calls = []

    async def decode(self, upload):
        call = PendingCall((upload,))
        self.calls.append(call)
        await call.wait()
        return await super().decode(upload)


class FakeClipboard:
    def __init__(self, error=None):
        self.copied = []
        self._error = error

    def copy(self, text):
        if self._error is not None:
            raise self._error
        self.copied.append(text)


def make_image_bytes(fmt="JPEG", size=(64, 48), color="teal"):
    buffer = io.BytesIO()
    Image.new("RGB", size, color=color).save(buffer, fmt)
    return buffer.getvalue()


def make_upload(name="photo.jpg", content_type="image/jpeg", total_bytes=None, fmt="JPEG", color="teal"):
    """
    Build an upload holding a real image, padded with trailing bytes up to total_bytes.
    """
    data = make_image_bytes(fmt=fmt, color=color)
    if total_bytes is not None and total_bytes > len(data):
        data += b"\0" * (total_bytes - len(data))
    return UploadedFile(filename=name, content_type=content_type, data=data)


async def wait_until(predicate, timeout=2.0, interval=0.005):
    """Yield to the event loop until predicate() is true."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("Condition not reached before timeout")
        await asyncio.sleep(interval)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration with fast ticks and short timeouts."""
    return PoemStudioConfig(
        progress_tick_seconds=0.01,
        request_timeout_seconds=1.0,
        download_dir=str(tmp_path / "downloads"),
    )


@pytest.fixture
def make_service(test_config, notifier):
    """Factory for a PoemStudioService wired to fakes."""

    def _make(generator=None, adjuster=None, ingestor=None, clipboard=None, **overrides):
        for key, value in overrides.items():
            setattr(test_config, key, value)
        return PoemStudioService(
            test_config,
            generation_service=generator or FakeGenerator(),
            adjustment_service=adjuster or FakeAdjuster(),
            notifier=notifier,
            ingestor=ingestor,
            clipboard=clipboard or FakeClipboard(),
        )

    return _make


@pytest.fixture
def fakes():
    """Access to the fake classes and helpers from test modules."""

    class _Fakes:
        PendingCall = PendingCall
        Generator = FakeGenerator
        Adjuster = FakeAdjuster
        Ingestor = GatedIngestor
        Clipboard = FakeClipboard

    _Fakes.make_upload = staticmethod(make_upload)
    _Fakes.make_image_bytes = staticmethod(make_image_bytes)
    _Fakes.wait_until = staticmethod(wait_until)
    return _Fakes
