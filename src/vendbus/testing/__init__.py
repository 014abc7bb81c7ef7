"""Testing helpers – fakes and property-based strategies for vendbus."""
