import sys

from grid_runner.cli import main

sys.exit(main())
