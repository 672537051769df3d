import sys

from ditawiki.cli import main

sys.exit(main())
