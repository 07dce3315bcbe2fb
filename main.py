import sys

from prop2json.cli import main

if __name__ == "__main__":
    sys.exit(main())
