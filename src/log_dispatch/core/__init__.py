"""Core dispatch pipeline: levels, tags, filters, sinks and the dispatcher."""
