"""Entry point: python -m taskpad"""

from taskpad.cli.main import main

if __name__ == "__main__":
    main()
