import sys

from migration_verifier.cli import main

sys.exit(main())
