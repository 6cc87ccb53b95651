"""Filter protected paths from the arguments of `rm` and similar commands."""
