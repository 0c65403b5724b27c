"""Application-wide constants for the SportClass scheduling service."""

from __future__ import annotations

from datetime import time

API_TITLE = "SportClass API"
API_DESCRIPTION = "Sports education lesson scheduling"
API_VERSION = "1.0.0"

# Lesson time-of-day window (inclusive on both ends)
EARLIEST_LESSON_START = time(6, 0)
LATEST_LESSON_START = time(22, 0)

# Lesson duration constraints
MIN_LESSON_DURATION = 30  # minutes
MAX_LESSON_DURATION = 240  # minutes (4 hours)
LONG_LESSON_THRESHOLD = 120  # minutes
DEFAULT_LESSON_DURATION = 60  # minutes, used when content has no duration

# Lesson period boundaries
AFTERNOON_STARTS_AT = time(12, 0)
EVENING_STARTS_AT = time(18, 0)

DEFAULT_LESSON_LOCATION = "Local padrão"
LESSON_TITLE_PREFIX = "Aula de "

# Text constraints
MIN_SPORT_NAME_LENGTH = 2
MAX_SPORT_NAME_LENGTH = 100
MIN_SPORT_CATEGORY_LENGTH = 2
MAX_SPORT_CATEGORY_LENGTH = 50

MIN_TEACHER_NAME_LENGTH = 2
MAX_TEACHER_NAME_LENGTH = 200
MIN_SPECIALIZATION_LENGTH = 2
MAX_SPECIALIZATION_LENGTH = 100
MAX_EMAIL_LENGTH = 254

MIN_TITLE_LENGTH = 5
MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 1000
MAX_URL_LENGTH = 500

MIN_LOCATION_LENGTH = 3
MAX_LOCATION_LENGTH = 100

# Content levels
LEVEL_FUNDAMENTAL_II = "Fundamental II"
LEVEL_MEDIO = "Médio"
CONTENT_LEVELS = (LEVEL_FUNDAMENTAL_II, LEVEL_MEDIO)

# Sport categories recognised by the classification helpers
CATEGORY_TEAM = "Coletivo"
CATEGORY_INDIVIDUAL = "Individual"
CATEGORY_AQUATIC = "Aquático"
AQUATIC_NAME_MARKERS = ("natação", "polo aquático")

VIDEO_URL_MARKERS = (".mp4", "youtube", "vimeo")
PDF_URL_MARKERS = (".pdf",)

# Query limits
DEFAULT_QUERY_LIMIT = 100
MAX_QUERY_LIMIT = 1000
