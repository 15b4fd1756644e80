"""Global pytest configuration."""

import os
import tempfile

# Keep the app's default store out of the working tree before any imports
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="trip-store-"))
