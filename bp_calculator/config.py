"""
BP Calculator - Configuration
=============================
Centralised service settings and clinical input bounds.
Loads overrides from the project-level .env file.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# ── Paths ───────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent
FRONTEND_DIR = Path(__file__).resolve().parent / "frontend"

# ── Load .env ───────────────────────────────────────────────────────────
load_dotenv(PROJECT_ROOT / ".env")

# ── Service identity ────────────────────────────────────────────────────
SERVICE_NAME = "BP Calculator + Category Explainer"
VERSION = "1.0.0"
ENVIRONMENT: str = os.getenv("BP_ENVIRONMENT", "Production")

# ── Logging ─────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("BP_LOG_LEVEL", "INFO")
LOG_FILE: str = os.getenv("BP_LOG_FILE", "")       # e.g. logs/app.txt, empty = console only

# ── Server ──────────────────────────────────────────────────────────────
HOST: str = os.getenv("BP_HOST", "0.0.0.0")
PORT: int = int(os.getenv("BP_PORT", "8000"))

# ── Accepted reading bounds (mmHg) ──────────────────────────────────────
SYSTOLIC_MIN = 70
SYSTOLIC_MAX = 190
DIASTOLIC_MIN = 40
DIASTOLIC_MAX = 100
