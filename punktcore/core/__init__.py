"""Core components: language variables, tokens, word splitting and first-pass annotation."""
