"""Command-line interface for job-fit-scorer."""
