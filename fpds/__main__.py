import sys

from fpds.demo import main

sys.exit(main())
