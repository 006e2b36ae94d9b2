"""Services that orchestrate core logic and report through the console."""
