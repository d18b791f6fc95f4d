"""Management CLI for the mock persistence endpoint.

Usage:
    python -m formwizard.cli show     # Print the server's current record
    python -m formwizard.cli reset    # Send the completion signal (reset)
    python -m formwizard.cli watch    # Run background sync, print changes

Talks to ``API_BASE_URL`` (default http://localhost:8000).
"""

import asyncio
import json
import logging
import sys

from formwizard.client.api import FormDataClient, FormSyncError
from formwizard.client.sync import BackgroundSync
from formwizard.schemas.wizard import FormData, WizardState
from formwizard.store import FormStore


def _print_record(record: FormData) -> None:
    print(json.dumps(record.model_dump(by_alias=True), indent=2))


async def show() -> None:
    async with FormDataClient() as client:
        _print_record(await client.fetch())


async def reset() -> None:
    async with FormDataClient() as client:
        _print_record(await client.complete())
    print("Form data reset.")


async def watch(stop: asyncio.Event | None = None) -> None:
    """Mirror the server record into a local store until ``stop`` is set."""
    store = FormStore()

    def _changed(state: WizardState) -> None:
        _print_record(state)

    store.subscribe(_changed)
    async with FormDataClient() as client:
        async with BackgroundSync(store, client):
            await (stop or asyncio.Event()).wait()


COMMANDS = {"show": show, "reset": reset, "watch": watch}


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    cmd = argv[0] if argv else ""
    if cmd not in COMMANDS:
        print(__doc__)
        return 2

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        asyncio.run(COMMANDS[cmd]())
    except FormSyncError as exc:
        print(f"  FAILED: {exc}")
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
