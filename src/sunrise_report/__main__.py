import sys

from sunrise_report.cli import main

sys.exit(main())
