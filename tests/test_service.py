"""
Tests for the PoemStudioService facade and the PoemStudioApp composition root.
"""
import asyncio
from pathlib import Path
from unittest.mock import patch

import pytest
from langchain_core.language_models import FakeListChatModel

from poem_studio import PoemStudioApp, PoemStudioConfig, SessionStatus
from poem_studio.adapters import RecordingNotifier
from poem_studio.exceptions import ClipboardUnavailable, GenerationError
from poem_studio.security import FileTooLarge
from poem_studio.styles import SAMPLE_POEM


class TestCopyAndDownload:

    def test_copy_generated_poem(self, make_service, fakes, notifier):
        clipboard = fakes.Clipboard()
        service = make_service(generator=fakes.Generator(poems=["copy me"]), clipboard=clipboard)
        asyncio.run(service.submit(fakes.make_upload()))

        assert service.copy_poem()
        assert clipboard.copied == ["copy me"]
        assert notifier.kinds() == ["Copied"]

    def test_copy_falls_back_when_clipboard_unavailable(self, make_service, fakes, notifier):
        clipboard = fakes.Clipboard(error=ClipboardUnavailable("headless"))
        service = make_service(clipboard=clipboard)

        assert not service.copy_poem()
        assert notifier.kinds() == ["ClipboardUnavailable"]

    def test_download_writes_file(self, make_service, fakes, notifier, test_config):
        service = make_service(generator=fakes.Generator(poems=["save me"]))
        asyncio.run(service.submit(fakes.make_upload()))

        path = service.download_poem()

        assert Path(path) == Path(test_config.download_dir) / "my-poem.txt"
        assert Path(path).read_text(encoding="utf-8") == "save me"
        assert notifier.kinds() == ["Downloaded"]

    def test_nothing_to_export_after_failed_generation(self, make_service, fakes, notifier):
        clipboard = fakes.Clipboard()
        service = make_service(generator=fakes.Generator(error=GenerationError("down")), clipboard=clipboard)
        asyncio.run(service.submit(fakes.make_upload()))
        notifier.drain()

        assert not service.copy_poem()
        assert service.download_poem() is None
        assert clipboard.copied == []
        assert notifier.notifications == []

    def test_no_export_while_generating(self, make_service, fakes):
        generator = fakes.Generator(gated=True)
        clipboard = fakes.Clipboard()
        service = make_service(generator=generator, clipboard=clipboard)

        async def scenario():
            task = asyncio.create_task(service.submit(fakes.make_upload()))
            await fakes.wait_until(lambda: len(generator.calls) == 1)
            assert not service.copy_poem()
            generator.calls[0].resolve("done")
            await task

        asyncio.run(scenario())
        assert clipboard.copied == []

    def test_sample_poem_can_be_copied(self, make_service, fakes):
        clipboard = fakes.Clipboard()
        service = make_service(clipboard=clipboard)
        assert service.copy_poem()
        assert clipboard.copied == [SAMPLE_POEM]


class TestSessionLifecycle:

    def test_reset_starts_fresh_sample_session(self, make_service, fakes):
        service = make_service()
        asyncio.run(service.submit(fakes.make_upload()))
        assert service.state.status is SessionStatus.READY

        service.reset()

        state = service.state
        assert state.is_sample
        assert state.status is SessionStatus.IDLE
        assert state.epoch == 0
        assert state.history == ()

    def test_history_accessor(self, make_service, fakes):
        service = make_service(generator=fakes.Generator(poems=["a", "b", "c", "d"]))

        async def scenario():
            for _ in range(4):
                await service.submit(fakes.make_upload())

        asyncio.run(scenario())

        assert [e.poem_text for e in service.history()] == ["d", "c", "b", "a"]
        assert [e.poem_text for e in service.history(3)] == ["d", "c", "b"]

    def test_config_controls_history_capacity(self, make_service, fakes):
        service = make_service(generator=fakes.Generator(poems=["1", "2", "3"]), history_capacity=2)

        async def scenario():
            for _ in range(3):
                await service.submit(fakes.make_upload())

        asyncio.run(scenario())
        assert [e.poem_text for e in service.history()] == ["3", "2"]


class TestPoemStudioApp:

    def test_requires_initialize(self):
        app = PoemStudioApp(PoemStudioConfig())
        with pytest.raises(RuntimeError, match="initialize"):
            app.state

    def test_end_to_end_with_fake_chat_model(self, tmp_path, fakes):
        """Test the app wires one chat model into both services."""
        llm = FakeListChatModel(responses=["A gull, a wave, a stone", "Gull / wave / stone"])
        config = PoemStudioConfig(llm=llm, progress_tick_seconds=0.01, download_dir=str(tmp_path))
        notifier = RecordingNotifier()
        app = PoemStudioApp(config, notifier=notifier, clipboard=fakes.Clipboard())
        app.initialize()

        async def scenario():
            await app.submit(fakes.make_upload())
            await app.change_style("haiku")

        asyncio.run(scenario())

        assert app.state.poem_text == "Gull / wave / stone"
        assert [e.poem_text for e in app.history()] == ["A gull, a wave, a stone"]
        assert app.copy_poem()

    def test_submit_path(self, tmp_path, fakes):
        image_path = tmp_path / "lake.png"
        image_path.write_bytes(fakes.make_image_bytes(fmt="PNG"))
        config = PoemStudioConfig(llm=FakeListChatModel(responses=["Still lake"]), progress_tick_seconds=0.01)
        app = PoemStudioApp(config, notifier=RecordingNotifier())
        app.initialize()

        epoch = asyncio.run(app.submit_path(str(image_path)))

        assert epoch == 1
        assert app.state.poem_text == "Still lake"
        assert app.state.image_payload.startswith("data:image/png;base64,")

    def test_submit_path_rejects_oversized_file_without_reading(self, tmp_path):
        image_path = tmp_path / "huge.png"
        with open(image_path, "wb") as f:
            f.truncate(300 * 1024 * 1024)
        app = PoemStudioApp(PoemStudioConfig(llm=FakeListChatModel(responses=["unused"])), notifier=RecordingNotifier())
        app.initialize()
        before = app.state

        with patch.object(Path, "read_bytes", side_effect=AssertionError("file was read")):
            with pytest.raises(FileTooLarge):
                asyncio.run(app.submit_path(str(image_path)))

        assert app.state == before
