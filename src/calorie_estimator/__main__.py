"""Allow ``python -m calorie_estimator``."""

import sys

from calorie_estimator.cli import main

if __name__ == "__main__":
    sys.exit(main())
