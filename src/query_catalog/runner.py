"""Top-level driver: connect, run every catalog entry, always disconnect."""

import asyncio
import logging
import os
import sys
from typing import Callable, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from query_catalog.catalog import CatalogSection, build_catalog
from query_catalog.core import DatabaseConnection, OperationExecutor, ResultFormatter
from query_catalog.errors import CatalogError
from query_catalog.models.config import CatalogConfig

logger = logging.getLogger(__name__)

Printer = Callable[[str], None]


class CatalogRunner:
    """Runs the catalog in order on a single connection."""

    def __init__(
        self,
        connection: DatabaseConnection,
        sections: list[CatalogSection],
        formatter: Optional[ResultFormatter] = None,
        printer: Printer = print,
    ):
        """
        Initialize catalog runner.

        Args:
            connection: Connection owned by this run (not yet initialized)
            sections: Catalog sections in display order
            formatter: Result formatter
            printer: Callable receiving each console line
        """
        self.connection = connection
        self.sections = sections
        self.formatter = formatter or ResultFormatter()
        self.printer = printer

    async def run(self) -> int:
        """
        Execute every entry, stopping at the first failure.

        The connection is released on every path and "Connection closed" is
        always the last line printed.

        Returns:
            Process exit code (0 on success, 1 on failure)
        """
        exit_code = 0
        try:
            await self.connection.initialize()
            self.printer("Connected to MongoDB server")

            executor = OperationExecutor(self.connection)
            for section in self.sections:
                await self._run_section(executor, section)
        except CatalogError as e:
            logger.error(f"Error occurred: {e}")
            exit_code = 1
        except Exception:
            logger.exception("Unexpected error occurred")
            exit_code = 1
        finally:
            await self.connection.dispose()
            self.printer("\nConnection closed")

        return exit_code

    async def _run_section(
        self, executor: OperationExecutor, section: CatalogSection
    ) -> None:
        self.printer(f"\n=== {section.title} ===")
        for number, operation in enumerate(section.operations, start=1):
            result = await executor.run(operation)
            self.printer(f"\n{self.formatter.heading(number, operation)}")
            for line in self.formatter.format(operation, result):
                self.printer(line)


def resolve_log_level(name: Optional[str]) -> int:
    """Map a level name such as "debug" to its logging constant, defaulting to INFO."""
    level = logging.getLevelName((name or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


async def main() -> int:
    """Main entry point: configure from environment and run the catalog."""
    try:
        config = CatalogConfig.from_env()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    runner = CatalogRunner(DatabaseConnection(config), build_catalog(config))
    return await runner.run()


def cli_entry() -> None:
    """
    Synchronous entry point for console script.

    This function is called by the 'query-catalog' console script.
    It sets up the event loop and runs the async main() function.
    """
    load_dotenv()
    logging.basicConfig(level=resolve_log_level(os.getenv("LOG_LEVEL")))

    try:
        exit_code = asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Stopped by user")
        exit_code = 130

    sys.exit(exit_code)


if __name__ == "__main__":
    cli_entry()
