import os

# Headless plotting for the graphing tests
os.environ.setdefault("MPLBACKEND", "Agg")
