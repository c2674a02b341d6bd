import sys

from treelox.lox import main

sys.exit(main())
