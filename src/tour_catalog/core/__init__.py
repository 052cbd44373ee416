"""Core building blocks shared by the tour catalog modules."""
