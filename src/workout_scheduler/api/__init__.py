"""HTTP API for the Workout Scheduler."""
