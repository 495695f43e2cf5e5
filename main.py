"""docsync: JSON localization sync tool.

Launch with: python main.py [--dry-run]
"""

import sys

from docsync.cli import main

if __name__ == "__main__":
    sys.exit(main())
