"""Tokenizer, instruction model, parser and serializer for path-data text."""
