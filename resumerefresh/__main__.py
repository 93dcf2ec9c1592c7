import sys

from resumerefresh.cli import main

sys.exit(main())
