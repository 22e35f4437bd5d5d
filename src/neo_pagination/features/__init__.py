"""Feature modules for neo-pagination."""
