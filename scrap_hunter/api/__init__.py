"""HTTP control and inspection surface."""
