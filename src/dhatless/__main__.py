import sys

from dhatless.commands import main

sys.exit(main())
