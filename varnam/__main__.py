import sys

from varnam.cli import main

sys.exit(main())
