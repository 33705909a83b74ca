# solarsense_api/analysis/config.py

import logging
import os
from pathlib import Path

from solarsense_api.analysis.models import MarketProfile

logger = logging.getLogger(__name__)

PROFILE_ENV_VAR = "SOLARSENSE_MARKET_PROFILE"

DEFAULT_MARKET_PROFILE = MarketProfile()


def load_market_profile(path=None):
    """
    Return the market profile to run with.

    Reads a JSON profile from `path`, or from the file named by the
    SOLARSENSE_MARKET_PROFILE environment variable. Keys left out of the
    file keep their default values. Without either, the built-in Indian
    market profile is returned.
    """
    path = path or os.environ.get(PROFILE_ENV_VAR)
    if not path:
        return DEFAULT_MARKET_PROFILE

    profile_path = Path(path)
    profile = MarketProfile.model_validate_json(profile_path.read_text(encoding="utf-8"))
    logger.info(f"Loaded market profile from {profile_path}")
    return profile
