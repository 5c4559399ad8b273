"""lengthlint infrastructure: tree walking and tree loading."""
