# Point the config directory somewhere disposable FIRST, before anything imports config
import os
import tempfile

os.environ["TERMFORM_HOME"] = tempfile.mkdtemp(prefix="termform-test-")

import sys
from pathlib import Path

# Add the parent directory to Python path so the top-level modules import directly
parent_dir = Path(__file__).parent.parent
sys.path.insert(0, str(parent_dir))
