import os
import sys
from pathlib import Path

# Ensure backend package is importable for tests
BACKEND_ROOT = Path(__file__).resolve().parents[1]
REPO_ROOT = BACKEND_ROOT.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

# Keep the test run offline; tests that need a remote provider inject a fake one.
os.environ.setdefault("SENTIMENT_PROVIDER", "none")
