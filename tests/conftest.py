import os

# Keep telemetry off the console while tests run; must happen before termedit
# modules configure telelog at import time.
os.environ.setdefault("TERMEDIT_DISABLE_CONSOLE", "1")
os.environ.setdefault("TERMEDIT_LOG_LEVEL", "WARNING")
