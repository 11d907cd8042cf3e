import sys

from phpflags.cli import main


sys.exit(main())
