"""BLS12-377 / BW6-761 precompile test vector generator."""
