import sys

from arsandbox.calibrate import main

sys.exit(main())
