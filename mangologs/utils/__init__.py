"""Small shared helpers: address validation and formatting."""
