"""Centralized imports for the HTTP service (app package)."""

# Standard library
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

# External
from dotenv import load_dotenv
from fastapi import (
    APIRouter,
    Body,
    HTTPException,
    Query,
)
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
