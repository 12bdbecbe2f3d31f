import sys
from vidshrink.cli import main

sys.exit(main())
