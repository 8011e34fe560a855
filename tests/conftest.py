import os
import sys

# Ensure `import poi_clean` works when pytest is run from the repo root without installing
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
