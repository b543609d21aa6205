"""
deyecli - command-line client for the Deye Cloud developer API.
"""

import sys
from deyecli.interface.cli.cli import main


if __name__ == "__main__":
    sys.exit(main())
