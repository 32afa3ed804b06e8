import sys

from gatesim.frontend.main import main

sys.exit(main())
