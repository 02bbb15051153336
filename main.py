"""
Spinny - Entry Point
====================

Main entry point for the bot.

Author: Spinny Team
"""

import asyncio
import sys

from dotenv import load_dotenv

load_dotenv()

from spinny.bot import SpinnyBot
from spinny.core.config import config
from spinny.core.logger import logger


async def main():
    """Main entry point."""
    if not config.TOKEN:
        logger.error("SPINNY_BOT_TOKEN not set in environment", [
            ("Hint", "Create a .env file with your Discord bot token"),
        ])
        sys.exit(1)

    bot = SpinnyBot()

    try:
        await bot.start(config.TOKEN)
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt")
    finally:
        await bot.close()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
