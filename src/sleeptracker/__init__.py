"""SleepTracker: track nights of sleep and rate their quality."""
