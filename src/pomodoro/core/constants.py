"""
Field limits shared by ORM models and Pydantic schemas.
"""

CATEGORY_NAME_MAX_LENGTH = 50
CATEGORY_DESCRIPTION_MAX_LENGTH = 200

TASK_TITLE_MAX_LENGTH = 50
TASK_DESCRIPTION_MAX_LENGTH = 200

SCHEDULE_TITLE_MAX_LENGTH = 50
SCHEDULE_DESCRIPTION_MAX_LENGTH = 200

TIMER_SETTINGS_NAME_MAX_LENGTH = 50
POMODORO_MAX_MINUTES = 120
SHORT_BREAK_MAX_MINUTES = 60
LONG_BREAK_MAX_MINUTES = 120
POMODOROS_BEFORE_LONG_BREAK_MAX = 10

POMODORO_COMMENT_MAX_LENGTH = 100
