"""Domain models, configuration and interfaces for job-fit-scorer."""
