# Allows running as python -m mcpconf
import sys

from mcpconf.cli import main

sys.exit(main())
