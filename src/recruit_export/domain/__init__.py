"""Domain – recruitment entities exported by this package."""
