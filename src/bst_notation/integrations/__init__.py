"""Third-party integrations for bst-notation."""
