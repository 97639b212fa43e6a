"""Bug tracker admin client."""
