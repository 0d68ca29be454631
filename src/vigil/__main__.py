# src/vigil/__main__.py
from vigil.cli.app import main

if __name__ == "__main__":
    main()
