"""lengthlint presentation layer: programmatic API and CLI."""
