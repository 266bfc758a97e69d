import sys

from lambic.cmdline import main

sys.exit(main())
