import sys

from cyberbot.main import main

if __name__ == "__main__":
    sys.exit(main())
