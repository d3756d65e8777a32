import os
import tempfile

# onetimesecret.config reads ONETIMESECRET_CACHE_DIR at import time, and pytest
# imports the package before the test modules run. Point it at a temp dir here so
# the tests never read or write the user's real cache directory.
os.environ.setdefault("ONETIMESECRET_CACHE_DIR", tempfile.mkdtemp())
