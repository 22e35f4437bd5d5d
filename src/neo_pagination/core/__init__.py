"""Core building blocks shared by every neo-pagination feature."""
