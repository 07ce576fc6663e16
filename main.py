import sys

from cheesedir.cli import main

if __name__ == "__main__":
    sys.exit(main())
