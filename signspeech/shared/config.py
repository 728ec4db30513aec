"""
Shared configuration for the sign speech service.

Centralised settings used by the translator core and the Flask service so
playback timing and heuristic confidences stay consistent everywhere.
"""

import logging
import os


def _env_float(name, default):
    value = os.getenv(name)
    return float(value) if value else default


def _env_int(name, default):
    value = os.getenv(name)
    return int(value) if value else default


# Playback Timing Configuration
PLAYBACK_CONFIG = {
    # Divides every wait duration (higher = faster)
    'speed_multiplier': _env_float('SIGN_SPEED', 1.0),

    # Base dwell time per word in milliseconds
    'pause_duration_ms': _env_int('SIGN_PAUSE_MS', 800),

    # Fixed settle added after each word pose
    'word_settle_ms': 600,

    # Fixed settle added after each fingerspelled letter
    'letter_settle_ms': 300,

    # Share of the base pause a single letter is held for
    'letter_pause_factor': 0.6,

    # Range offered by the UI speed slider
    'speed_range': (0.3, 3.0),

    # Range offered by the UI pause slider
    'pause_range_ms': (200, 2000),
}

# Heuristic Prediction Confidences
CONFIDENCE = {
    'dictionary': 1.0,
    'fingerspelling': 1.0,
    'greeting': 0.75,
    'emotion': 0.7,
    'action': 0.65,
    'question': 0.7,
}

# Server Configuration
SERVER_CONFIG = {
    'port': _env_int('SIGN_PORT', 8000),
    'cors_origins': [
        "http://localhost:3000",
        "http://localhost:5173",  # Vite dev
    ],
    'secret_key': os.getenv('SECRET_KEY', 'dev-secret-key'),
}

# Transcript Configuration
TRANSCRIPT_CONFIG = {
    # Oldest entries are dropped beyond this
    'max_entries': 200,
}

# Logging Configuration
LOGGING = {
    'level': os.getenv('SIGN_LOG_LEVEL', 'INFO'),  # DEBUG, INFO, WARNING, ERROR
    'format': '[SIGN] %(asctime)s [%(levelname)s] %(name)s: %(message)s',
    'date_format': '%Y-%m-%d %H:%M:%S',
}


def configure_logging(level=None):
    """Apply the LOGGING settings to the root logger."""
    logging.basicConfig(
        level=level or LOGGING['level'],
        format=LOGGING['format'],
        datefmt=LOGGING['date_format'],
    )
