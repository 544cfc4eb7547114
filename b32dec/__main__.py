import sys

from b32dec.main import main

sys.exit(main())
