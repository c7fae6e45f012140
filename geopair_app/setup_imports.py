"""
setup_imports.py

Centralized module imports for the GeoPair batch tool.
Keeps the app modules on the same pandas / numpy / logging / dotenv setup.
"""

import os
import sys
import logging
from pathlib import Path

# Data Handling
import pandas as pd
import numpy as np

# Utility Functions
from typing import Dict, List, Tuple, Optional

# Environment (.env next to the working directory, if any)
from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
