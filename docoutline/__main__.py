import sys

from docoutline.cli import main

sys.exit(main())
