import sys

from marketview.cli import main

sys.exit(main())
