import sys

from gallery_layout.main import main

sys.exit(main())
