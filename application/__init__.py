"""
Application Layer for the workout insight engine.

This package contains:
- ports/: Abstract repository interfaces (what the analyzers need)
"""
