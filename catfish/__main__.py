import sys

from catfish.game import main

sys.exit(main())
