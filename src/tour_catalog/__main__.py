"""Allow ``python -m tour_catalog``."""

from tour_catalog.run import main

main()
