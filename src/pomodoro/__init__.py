"""
Pomodoro time tracker API.

Users own categories, tasks, schedules, timer settings and the pomodoros
recorded against tasks; every route is scoped to the caller's own records.
The ASGI application lives in ``pomodoro.main``.
"""
