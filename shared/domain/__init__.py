"""DDD building blocks: value objects, errors and results."""
