"""Entry point for the sign library tools - run with: python run.py <command>"""

import sys

from sign_library.main import main


if __name__ == "__main__":
    sys.exit(main())
