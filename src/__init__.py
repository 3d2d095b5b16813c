"""DompetPintar personal finance dashboard."""
