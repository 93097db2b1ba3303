import sys

from ball_arena.cli import main

sys.exit(main())
