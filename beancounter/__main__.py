import sys

from beancounter.cli import main

sys.exit(main())
