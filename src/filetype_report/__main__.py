import sys

from filetype_report.cli import main

sys.exit(main())
