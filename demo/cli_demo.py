#!/usr/bin/env python3
"""
Interactive CLI demo for Poem Studio.

Upload a photo, get a poem, restyle it, copy or download it.
"""
import asyncio
import logging
import shlex

from poem_studio import (
    FileValidationError,
    ImageDecodeError,
    PoemStudioApp,
    load_config_from_env,
)
from poem_studio.adapters import LoggingNotifier, RecordingNotifier
from poem_studio.styles import KNOWN_STYLES, is_known_style

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)


def print_banner():
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  Poem Studio - Interactive CLI Demo")
    print("=" * 60)
    print("\nCommands:")
    print("  upload <path>   Turn an image into a poem")
    print(f"  style <name>    Restyle the poem ({', '.join(KNOWN_STYLES)})")
    print("  show            Show the current poem and status")
    print("  history         Show recent creations")
    print("  copy            Copy the poem to the clipboard")
    print("  download        Save the poem as my-poem.txt")
    print("  quit            End the session")
    print("-" * 60 + "\n")


def print_state(app: PoemStudioApp):
    state = app.state
    label = " (sample)" if state.is_sample else ""
    print(f"\n📊 Status: {state.status.value} | Style: {state.style} | Epoch: {state.epoch}")
    print(f"📝 Poem{label}:\n")
    print(state.poem_text or "(empty)")
    print("-" * 60)


def print_history(app: PoemStudioApp):
    entries = app.history(3)
    if not entries:
        print("\nNo creations yet.")
        return
    print("\n⭐ Recent Creations")
    for entry in entries:
        print(f"\n[epoch {entry.epoch}]\n{entry.poem_text}")
    print("-" * 60)


def print_notifications(notifier: RecordingNotifier):
    for notification in notifier.drain():
        print(f"🔔 {notification.title}: {notification.message}")


async def handle_command(app: PoemStudioApp, command: str, args: list) -> bool:
    """Run one command. Returns False when the session should end."""
    if command in ("quit", "exit"):
        return False

    if command == "upload" and args:
        try:
            await app.submit_path(args[0])
        except FileNotFoundError:
            print(f"\n❌ File not found: {args[0]}")
        except (FileValidationError, ImageDecodeError) as e:
            print(f"\n❌ {e}")
        print_state(app)
    elif command == "style" and args:
        style = " ".join(args)
        if not is_known_style(style):
            print(f"ℹ️  '{style}' is not a built-in style, trying anyway")
        await app.change_style(style)
        print_state(app)
    elif command == "show":
        print_state(app)
    elif command == "history":
        print_history(app)
    elif command == "copy":
        app.copy_poem()
    elif command == "download":
        path = app.download_poem()
        if path:
            print(f"💾 Saved to {path}")
    else:
        print("Unknown command. Type 'quit' to exit.")

    return True


async def main():
    print_banner()

    config = load_config_from_env()
    notifier = RecordingNotifier(forward_to=LoggingNotifier())
    app = PoemStudioApp(config, notifier=notifier)
    app.initialize()
    print_state(app)

    while True:
        try:
            line = await asyncio.to_thread(input, "🖋️  > ")
        except (EOFError, KeyboardInterrupt):
            break

        try:
            parts = shlex.split(line.strip())
        except ValueError as e:
            print(f"❌ Could not parse command: {e}")
            continue
        if not parts:
            continue

        keep_going = await handle_command(app, parts[0].lower(), parts[1:])
        print_notifications(notifier)
        if not keep_going:
            break

    print("\n👋 Goodbye!")


if __name__ == "__main__":
    asyncio.run(main())
