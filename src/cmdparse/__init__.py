from __future__ import annotations

from cmdparse.parser import *  # noqa: F403
from cmdparse.parser import __all__
