"""Allow ``python -m csv_geojson``."""

import sys

from csv_geojson.cli import main

sys.exit(main())
