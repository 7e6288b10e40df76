import sys

from tailblocks.client.cli import main

sys.exit(main())
