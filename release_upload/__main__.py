"""Allow running as python -m release_upload."""

import sys

from release_upload.cli.main import main

sys.exit(main())
