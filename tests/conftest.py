"""Root conftest: shared test configuration."""

import os

# Module-level cardlist.main.app reads settings at import; keep it deterministic
os.environ.setdefault("API_TOKEN", "test-token")
os.environ.setdefault("NODE_ENV", "development")
