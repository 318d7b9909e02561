"""PC Builder — build compatibility engine and storefront helpers."""
