"""Service layer package.

Keep imports lazy to avoid initializing provider clients at import time.
"""
