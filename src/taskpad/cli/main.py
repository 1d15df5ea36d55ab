"""Console entry point: ``taskpad`` or ``python -m taskpad``."""

import asyncio

from taskpad.cli.app import TaskpadApp


def main() -> None:
    app = TaskpadApp()
    asyncio.run(app.run())


if __name__ == "__main__":
    main()
