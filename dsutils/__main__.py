import sys

from dsutils.cli import main

sys.exit(main())
