"""Source payload extraction package."""
