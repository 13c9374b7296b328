"""Product catalog filtering, sorting and pagination with shared filter state."""
