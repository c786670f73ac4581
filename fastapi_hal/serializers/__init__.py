"""Bean extraction and item serializers."""
