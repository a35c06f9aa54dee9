#!/usr/bin/env python
"""
paths.py – single source of truth for project folders.
           Import these constants everywhere.
"""

import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parents[1]

# Try to get root from environment variable first
ROOT = os.environ.get('SKRIV_ROOT')
if ROOT:
    ROOT = Path(ROOT).resolve()
else:
    # Fallback: look for a marker file (like .git or pyproject.toml) in parent directories
    current = PACKAGE_DIR
    while current.parent != current:
        if any((current / marker).exists() for marker in ['.git', 'pyproject.toml', 'README.md']):
            ROOT = current
            break
        current = current.parent
    else:
        # installed without a checkout around it
        ROOT = Path.cwd()

# static data ships inside the package
DATA_DIR     = PACKAGE_DIR / "data"
LOCALES_DIR  = DATA_DIR / "locales"
WORDBANK_DIR = DATA_DIR / "wordbanks"

CONFIG_DIR  = ROOT / "config"
LOG_DIR     = Path(os.environ.get('SKRIV_LOG_DIR', ROOT / "logs"))

# guarantee critical folders exist at import-time
for p in (LOG_DIR,):
    p.mkdir(parents=True, exist_ok=True)
