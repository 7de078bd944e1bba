import sys

from folderbench.cli import main

sys.exit(main())
