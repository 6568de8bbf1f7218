import os
import tempfile

# Keep logs and state.json out of the real user data folder while testing.
os.environ.setdefault("OKI_DATA_DIR", tempfile.mkdtemp(prefix="oki-tests-"))
