"""Join rows linking attachment figures to descendants (`descendant_attachments`)."""
