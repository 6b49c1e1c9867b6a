# tests/api/conftest.py
import sys
import os
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).parents[2]
sys.path.insert(0, str(project_root))

# Set test environment variables before the app is imported
os.environ["DEBUG"] = "true"
os.environ["API_KEY"] = "dev_key"
