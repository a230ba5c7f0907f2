import sys

from fieldguard.cli.validate_cli import main

sys.exit(main())
