import sys

from tonewav.cli import main

sys.exit(main())
