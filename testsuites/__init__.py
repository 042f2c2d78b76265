"""
Test suites package.

Holds the page facade framework (`ui_testing.framework`) next to the suites
that exercise it, and stays importable for:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - page objects of downstream projects
"""
