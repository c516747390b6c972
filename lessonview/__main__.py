import sys

from lessonview.cli import main

sys.exit(main())
