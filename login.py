import sys
from login_probe.probe import main

if __name__ == "__main__":
    sys.exit(main())
