import sys

from dcp_importer.cli import main

sys.exit(main())
