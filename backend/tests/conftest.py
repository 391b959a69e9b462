import os
import sys
from pathlib import Path


# Keep tests deterministic and local-only.
os.environ["PROFILESCAN_SKIP_DOTENV"] = "1"
os.environ["PROFILESCAN_OCR_BACKEND"] = "mock"
os.environ["PROFILESCAN_OCR_LANG"] = "eng"
os.environ["PROFILESCAN_OCR_TIMEOUT_SECONDS"] = "5"
os.environ["PROFILESCAN_CORS_ORIGINS"] = "http://localhost:3000,http://localhost:3001"
os.environ.pop("PROFILESCAN_MAX_UPLOAD_BYTES", None)

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))
