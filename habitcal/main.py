"""habitcal - main entry point.

Boots the Telegram transport and routes every incoming message to the
sender's habit screen.
"""

import asyncio
import logging

from habitcal.config import LOG_LEVEL
from habitcal import runtime_state
from habitcal.commands import dispatch
from habitcal.transport import IncomingMessage
from habitcal.transport.telegram import TelegramTransport, set_message_handler

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)-5s %(name)s - %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("habitcal")


async def handle_message(msg: IncomingMessage) -> str:
    """Central message handler - called by all transports."""
    screen = runtime_state.get_screen(msg.channel_id)
    result = dispatch(screen, msg.text)
    if not result.success:
        log.debug("Command failed for chat %d: %s", msg.channel_id, result.output)
    return result.output


async def main():
    """Boot sequence."""
    log.info("habitcal starting up...")

    transport = TelegramTransport()
    set_message_handler(handle_message)

    await transport.start()
    log.info("Transport started: %s", transport.name)

    try:
        while True:
            await asyncio.sleep(3600)
    except (KeyboardInterrupt, SystemExit, asyncio.CancelledError):
        log.info("Shutting down...")
        await transport.stop()
        runtime_state.clear_all()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
