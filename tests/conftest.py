from __future__ import annotations

import os

# Keep telemetry quiet while the suite runs.
os.environ.setdefault("REVISE_DISABLE_CONSOLE", "1")
os.environ.setdefault("REVISE_LOG_LEVEL", "ERROR")
