import sys

from geomart.cli import main

sys.exit(main())
