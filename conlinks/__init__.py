"""conlinks - include/exclude path rules for consistent attachments and links."""
