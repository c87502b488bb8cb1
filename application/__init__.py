"""
Application Layer for the WOD results service.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- use_cases/: Score editing, custom workouts and the result editing session
- errors: Validation and lookup errors raised to callers
"""
