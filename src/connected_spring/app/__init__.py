"""Desktop app and the headless pieces it drives."""
