import sys

from javascan.cli import main

sys.exit(main())
