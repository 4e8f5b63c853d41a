import sys

from sensorquery.cli import main

sys.exit(main())
