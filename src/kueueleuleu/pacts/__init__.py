"""Public contracts: types, errors and helpers."""
