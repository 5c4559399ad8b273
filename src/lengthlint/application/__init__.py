"""lengthlint application layer."""
