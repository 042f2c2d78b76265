"""UI automation: page facade framework and browser tests."""
