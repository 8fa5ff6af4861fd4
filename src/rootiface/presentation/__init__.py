"""rootiface presentation layer."""
