import sys

from blis.main import main

sys.exit(main())
