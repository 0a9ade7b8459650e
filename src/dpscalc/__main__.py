"""Allow ``python -m dpscalc``."""
from __future__ import annotations

from .main import main

main()
