import sys

from console_arcade.cli import main

sys.exit(main())
